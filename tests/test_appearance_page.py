"""Qt wiring of the Appearance page and the preferences window."""

import pytest

pytest.importorskip("PySide6.QtWidgets", reason="PySide6 GUI stack is not available")

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFontDialog, QMessageBox

from core.appearance_panel import AppearanceSettingsPanel
from models.appearance import FontChoice, MinimumFontSizePreference, MINIMUM_FONT_SIZES
from ui.app_settings import AppSettingsDialog, AppearanceSettingsPage
from ui.app_settings import font_picker
from ui.app_settings.font_picker import QtFontPicker, to_qfont, from_qfont


@pytest.fixture
def page(qapp, controller, picker) -> AppearanceSettingsPage:
    panel = AppearanceSettingsPanel(controller, picker, view_factory=AppearanceSettingsPage)
    return panel.root_view()


def test_page_shows_stored_values(qapp, controller, picker):
    controller.set_article_font(FontChoice("Georgia", 14))
    controller.set_minimum_font_size(MinimumFontSizePreference(enabled=False, size=18))
    controller.set_show_folder_images(False)

    page = AppearanceSettingsPanel(controller, picker, view_factory=AppearanceSettingsPage).root_view()

    assert page.article_font_sample.text() == "Georgia 14 pt"
    assert page.article_font_sample.font().family() == "Georgia"
    assert page.article_font_sample.font().pointSizeF() == 14
    assert page.folder_font_sample.text() == "Helvetica 12 pt"
    assert page.minimum_font_sizes.count() == len(MINIMUM_FONT_SIZES)
    assert page.minimum_font_sizes.currentData() == 18
    assert not page.minimum_font_sizes.isEnabled()
    assert not page.enable_minimum_font_size.isChecked()
    assert not page.show_folder_images.isChecked()


def test_article_font_button_updates_sample(page, controller, picker):
    picker.results.append(FontChoice("Courier", 16))

    page.article_font_button.click()

    assert controller.get_article_font() == FontChoice("Courier", 16)
    assert page.article_font_sample.text() == "Courier 16 pt"
    assert page.article_font_sample.font().pointSizeF() == 16


def test_cancelled_folder_font_keeps_sample(page, controller, picker):
    page.folder_font_button.click()

    assert picker.calls
    assert page.folder_font_sample.text() == "Helvetica 12 pt"
    assert controller.get_folder_font() == FontChoice("Helvetica", 12)


def test_minimum_size_checkbox_drives_selector(page, controller):
    page.enable_minimum_font_size.click()

    assert page.minimum_font_sizes.isEnabled()
    assert controller.get_minimum_font_size().enabled is True

    index = page.minimum_font_sizes.findData(14)
    page.minimum_font_sizes.setCurrentIndex(index)
    page.minimum_font_sizes.activated.emit(index)
    assert controller.get_minimum_font_size() == MinimumFontSizePreference(enabled=True, size=14)

    page.enable_minimum_font_size.click()
    assert not page.minimum_font_sizes.isEnabled()
    assert controller.get_minimum_font_size() == MinimumFontSizePreference(enabled=False, size=14)

    page.enable_minimum_font_size.click()
    assert page.minimum_font_sizes.currentData() == 14


def test_show_folder_images_checkbox(page, controller):
    page.show_folder_images.click()
    assert controller.get_show_folder_images() is False

    page.show_folder_images.click()
    assert controller.get_show_folder_images() is True


def test_qfont_conversion(qapp):
    font = to_qfont(FontChoice("Menlo", 10.5))
    assert font.family() == "Menlo"
    assert from_qfont(font) == FontChoice("Menlo", 10.5)
    assert isinstance(from_qfont(to_qfont(FontChoice("Menlo", 12))).size, int)


def test_pixel_sized_font_converts_to_points(qapp, monkeypatch):
    monkeypatch.setattr(font_picker, "logical_dpi", lambda: 96.0)
    font = QFont("Courier")
    font.setPixelSize(16)

    assert from_qfont(font) == FontChoice("Courier", 12)


def test_qt_font_picker_returns_confirmed_font(qapp, monkeypatch):
    calls = []

    def get_font(initial, parent, title):
        calls.append((initial.family(), initial.pointSizeF(), title))
        return True, QFont("Courier", 16)

    monkeypatch.setattr(QFontDialog, "getFont", get_font)

    choice = QtFontPicker().pick_font(FontChoice("Georgia", 14), "Article List Font")

    assert choice == FontChoice("Courier", 16)
    assert calls == [("Georgia", 14, "Article List Font")]


def test_qt_font_picker_cancel_returns_none(qapp, monkeypatch):
    monkeypatch.setattr(QFontDialog, "getFont", lambda initial, parent, title: (False, QFont()))

    assert QtFontPicker().pick_font(FontChoice("Georgia", 14), "Folder List Font") is None


def test_dialog_lists_appearance_page(qapp, controller, picker):
    dialog = AppSettingsDialog(controller, font_picker=picker)

    assert dialog.sidebar.count() == 1
    assert dialog.sidebar.item(0).text() == "Appearance"
    assert dialog.content_stack.count() == 1


def test_dialog_restore_defaults_reloads_page(qapp, controller, picker, monkeypatch):
    dialog = AppSettingsDialog(controller, font_picker=picker)
    page = dialog.appearance_panel.root_view()
    picker.results.append(FontChoice("Georgia", 20))
    page.article_font_button.click()
    page.enable_minimum_font_size.click()
    assert page.article_font_sample.text() == "Georgia 20 pt"

    monkeypatch.setattr(QMessageBox, "question", lambda *args, **kwargs: QMessageBox.Yes)
    dialog.restore_btn.click()

    assert page.article_font_sample.text() == "Helvetica 12 pt"
    assert not page.enable_minimum_font_size.isChecked()
    assert not page.minimum_font_sizes.isEnabled()


def test_dialog_reflects_external_changes(qapp, controller, picker):
    dialog = AppSettingsDialog(controller, font_picker=picker)
    page = dialog.appearance_panel.root_view()

    controller.set_folder_font(FontChoice("Verdana", 11))
    controller.set_show_folder_images(False)

    assert page.folder_font_sample.text() == "Verdana 11 pt"
    assert not page.show_folder_images.isChecked()
