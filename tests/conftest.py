"""Shared fakes and fixtures for the appearance preferences tests."""

import os
from typing import List, Optional, Sequence

import pytest

# Qt widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings

from core.app_settings import AppSettingsController
from core.appearance_panel import AppearanceSettingsPanel
from models.appearance import (
    FontChoice, MinimumFontSizePreference,
    DEFAULT_ARTICLE_FONT, DEFAULT_FOLDER_FONT,
    DEFAULT_MINIMUM_FONT_SIZE_PREFERENCE, DEFAULT_SHOW_FOLDER_IMAGES
)
from utils.logger import logger


class FakeStore:
    """In-memory AppearanceStore that records every write."""

    def __init__(self):
        self.article_font = DEFAULT_ARTICLE_FONT
        self.folder_font = DEFAULT_FOLDER_FONT
        self.minimum_font_size = DEFAULT_MINIMUM_FONT_SIZE_PREFERENCE
        self.show_folder_images = DEFAULT_SHOW_FOLDER_IMAGES
        self.writes: List[tuple] = []

    def get_article_font(self) -> FontChoice:
        return self.article_font

    def set_article_font(self, font: FontChoice) -> None:
        self.writes.append(("article_font", font))
        self.article_font = font

    def get_folder_font(self) -> FontChoice:
        return self.folder_font

    def set_folder_font(self, font: FontChoice) -> None:
        self.writes.append(("folder_font", font))
        self.folder_font = font

    def get_minimum_font_size(self) -> MinimumFontSizePreference:
        return self.minimum_font_size

    def set_minimum_font_size(self, value: MinimumFontSizePreference) -> None:
        self.writes.append(("minimum_font_size", value))
        self.minimum_font_size = value

    def get_show_folder_images(self) -> bool:
        return self.show_folder_images

    def set_show_folder_images(self, visible: bool) -> None:
        self.writes.append(("show_folder_images", visible))
        self.show_folder_images = visible


class FakeFontPicker:
    """Returns queued results in order; None stands for a cancelled dialog."""

    def __init__(self):
        self.results: List[Optional[FontChoice]] = []
        self.calls: List[tuple] = []

    def pick_font(self, initial: FontChoice, title: str) -> Optional[FontChoice]:
        self.calls.append((initial, title))
        return self.results.pop(0) if self.results else None


class FakeView:
    """AppearanceView that remembers what the panel pushed to it."""

    def __init__(self, panel):
        self.panel = panel
        self.article_preview = None
        self.folder_preview = None
        self.size_choices: List[int] = []
        self.size_value: Optional[int] = None
        self.size_control_enabled: Optional[bool] = None
        self.size_checked: Optional[bool] = None
        self.folder_images_checked: Optional[bool] = None

    def set_article_preview(self, text: str, font: FontChoice) -> None:
        self.article_preview = (text, font)

    def set_folder_preview(self, text: str, font: FontChoice) -> None:
        self.folder_preview = (text, font)

    def set_minimum_size_choices(self, sizes: Sequence[int]) -> None:
        self.size_choices = list(sizes)

    def set_minimum_size_value(self, size: int) -> None:
        if size in self.size_choices:
            self.size_value = size

    def minimum_size_value(self) -> Optional[int]:
        return self.size_value

    def set_minimum_size_control_enabled(self, enabled: bool) -> None:
        self.size_control_enabled = enabled

    def set_minimum_size_checked(self, checked: bool) -> None:
        self.size_checked = checked

    def set_show_folder_images_checked(self, checked: bool) -> None:
        self.folder_images_checked = checked

    # User interactions
    def toggle_minimum_size(self, checked: bool) -> None:
        self.size_checked = checked
        self.panel.change_minimum_font_size(checked)

    def choose_size(self, size: int) -> None:
        self.size_value = size
        self.panel.select_minimum_font_size(size)


@pytest.fixture(autouse=True)
def clear_log():
    logger.clear()
    yield
    logger.clear()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def picker() -> FakeFontPicker:
    return FakeFontPicker()


@pytest.fixture
def panel(store, picker) -> AppearanceSettingsPanel:
    panel = AppearanceSettingsPanel(store=store, font_picker=picker, view_factory=FakeView)
    panel.root_view()
    return panel


@pytest.fixture
def view(panel) -> FakeView:
    return panel.view


@pytest.fixture
def ini_settings(tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "preferences.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def controller(ini_settings) -> AppSettingsController:
    return AppSettingsController(ini_settings)


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip(
        "PySide6.QtWidgets", reason="PySide6 GUI stack is not available"
    )
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def view_factory():
    return FakeView
