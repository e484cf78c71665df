"""
Appearance Settings Page

Settings page for appearance configuration:
- Article list font (with live sample)
- Folder list font (with live sample)
- Minimum font size enforcement
- Folder image visibility

The page only owns widgets. All preference logic lives in
AppearanceSettingsPanel, which drives this page through its view methods.
"""

from typing import Optional, Sequence, TYPE_CHECKING

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QComboBox, QGroupBox, QCheckBox
)
from PySide6.QtCore import Qt

from models.appearance import FontChoice
from .font_picker import to_qfont

if TYPE_CHECKING:
    from core.appearance_panel import AppearanceSettingsPanel


class AppearanceSettingsPage(QWidget):
    """
    Settings page for fonts, minimum font size and folder images.

    Only user-driven signals (clicked, activated) are connected, so
    programmatic updates coming from the panel never call back into it.
    """

    def __init__(self, panel: 'AppearanceSettingsPanel'):
        """
        Initialize appearance settings page.

        Args:
            panel: AppearanceSettingsPanel that owns this page (injected dependency)
        """
        super().__init__()
        self.panel = panel
        self.setObjectName("appearancePage")
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Build UI with font samples, minimum size selector and folder toggle."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        # ============================================================
        # Title
        # ============================================================
        title = QLabel("Appearance")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)

        # ============================================================
        # Fonts
        # ============================================================
        fonts_group = QGroupBox("Fonts")
        fonts_layout = QVBoxLayout()
        fonts_layout.setSpacing(12)

        self.article_font_sample, self.article_font_button = self._add_font_row(
            fonts_layout, "Article list:", "articleFontSample"
        )
        self.article_font_button.setToolTip("Choose the font used in the article list")
        self.article_font_button.clicked.connect(self.panel.select_article_font)

        self.folder_font_sample, self.folder_font_button = self._add_font_row(
            fonts_layout, "Folder list:", "folderFontSample"
        )
        self.folder_font_button.setToolTip("Choose the font used in the folder list")
        self.folder_font_button.clicked.connect(self.panel.select_folder_font)

        fonts_group.setLayout(fonts_layout)
        layout.addWidget(fonts_group)

        # ============================================================
        # Minimum Font Size
        # ============================================================
        minimum_group = QGroupBox("Minimum Font Size")
        minimum_layout = QHBoxLayout()
        minimum_layout.setSpacing(8)

        self.enable_minimum_font_size = QCheckBox("Never use font sizes smaller than")
        self.enable_minimum_font_size.setToolTip(
            "Clamp article and folder fonts to the selected size"
        )
        self.enable_minimum_font_size.clicked.connect(self.panel.change_minimum_font_size)

        self.minimum_font_sizes = QComboBox()
        self.minimum_font_sizes.setFixedWidth(100)
        self.minimum_font_sizes.activated.connect(self._on_minimum_size_activated)

        minimum_layout.addWidget(self.enable_minimum_font_size)
        minimum_layout.addWidget(self.minimum_font_sizes)
        minimum_layout.addStretch()
        minimum_group.setLayout(minimum_layout)
        layout.addWidget(minimum_group)

        # ============================================================
        # Folders
        # ============================================================
        folders_group = QGroupBox("Folders")
        folders_layout = QVBoxLayout()

        self.show_folder_images = QCheckBox("Show folder images")
        self.show_folder_images.setToolTip("Display feed icons next to folders in the folder list")
        self.show_folder_images.clicked.connect(self.panel.change_show_folder_images)
        folders_layout.addWidget(self.show_folder_images)

        folders_group.setLayout(folders_layout)
        layout.addWidget(folders_group)

        layout.addStretch()

    def _add_font_row(self, parent_layout: QVBoxLayout, caption: str, sample_name: str):
        row = QHBoxLayout()
        row.setSpacing(8)

        caption_label = QLabel(caption)
        caption_label.setStyleSheet("font-weight: 500;")
        caption_label.setFixedWidth(90)

        sample = QLabel()
        sample.setObjectName(sample_name)
        sample.setTextInteractionFlags(Qt.TextInteractionFlag.NoTextInteraction)

        button = QPushButton("Select...")
        button.setFixedWidth(100)

        row.addWidget(caption_label)
        row.addWidget(sample, 1)
        row.addWidget(button)
        parent_layout.addLayout(row)
        return sample, button

    def _on_minimum_size_activated(self, index: int) -> None:
        self.panel.select_minimum_font_size(self.minimum_font_sizes.itemData(index))

    # ============================================================
    # View methods driven by the panel
    # ============================================================

    def set_article_preview(self, text: str, font: FontChoice) -> None:
        self.article_font_sample.setText(text)
        self.article_font_sample.setFont(to_qfont(font))

    def set_folder_preview(self, text: str, font: FontChoice) -> None:
        self.folder_font_sample.setText(text)
        self.folder_font_sample.setFont(to_qfont(font))

    def set_minimum_size_choices(self, sizes: Sequence[int]) -> None:
        self.minimum_font_sizes.clear()
        for size in sizes:
            self.minimum_font_sizes.addItem(str(size), size)

    def set_minimum_size_value(self, size: int) -> None:
        index = self.minimum_font_sizes.findData(size)
        if index >= 0:
            self.minimum_font_sizes.setCurrentIndex(index)

    def minimum_size_value(self) -> Optional[int]:
        value = self.minimum_font_sizes.currentData()
        return value if isinstance(value, int) else None

    def set_minimum_size_control_enabled(self, enabled: bool) -> None:
        self.minimum_font_sizes.setEnabled(enabled)

    def set_minimum_size_checked(self, checked: bool) -> None:
        self.enable_minimum_font_size.setChecked(checked)

    def set_show_folder_images_checked(self, checked: bool) -> None:
        self.show_folder_images.setChecked(checked)
