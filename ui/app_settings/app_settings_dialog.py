"""
App Settings Dialog

Preferences window with sidebar navigation over preference pages.
Takes AppSettingsController via dependency injection (constructor parameter).

Pages follow the preferences page contract:
- identifier: stable page id
- toolbar_label / toolbar_icon: sidebar entry
- root_view(): widget shown in the content area, built on demand
"""

from typing import List, Optional, TYPE_CHECKING

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QListWidget,
    QStackedWidget, QPushButton, QMessageBox, QScrollArea, QListWidgetItem
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut, QIcon

from core.appearance_panel import AppearanceSettingsPanel, FontPicker
from .appearance_page import AppearanceSettingsPage
from .font_picker import QtFontPicker

if TYPE_CHECKING:
    from core.app_settings import AppSettingsController


class AppSettingsDialog(QDialog):
    """
    Preferences window with sidebar navigation.

    NOT responsible for creating controller - it's injected via constructor.
    Every change is written as soon as it is made, so the window only
    offers Restore Defaults and Close.

    Usage:
        controller = AppSettingsController()
        dialog = AppSettingsDialog(controller=controller, parent=main_window)
        dialog.exec()
    """

    def __init__(
            self,
            controller: 'AppSettingsController',
            parent=None,
            font_picker: Optional[FontPicker] = None
    ):
        """
        Initialize preferences window.

        Args:
            controller: AppSettingsController instance (injected dependency)
            parent: Parent widget (usually the main window)
            font_picker: Font picker override; defaults to QFontDialog
        """
        super().__init__(parent)
        self.controller = controller
        self.font_picker = font_picker or QtFontPicker(self)

        # Setup window
        self.setWindowTitle("Preferences")
        self.setMinimumSize(500, 400)
        self.resize(640, 420)

        # Build UI
        self._setup_ui()
        self._create_pages()
        self._setup_shortcuts()

        # Keep pages in sync with changes made elsewhere (e.g. Restore Defaults)
        self.controller.appearance_changed.connect(self._reload_all_pages)

    def _setup_ui(self) -> None:
        """Build dialog layout with sidebar and content area."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # ============================================================
        # Content Area: Sidebar + Pages
        # ============================================================
        content_layout = QHBoxLayout()
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)

        self.sidebar = QListWidget()
        self.sidebar.setFixedWidth(180)
        self.sidebar.setObjectName("settingsSidebar")
        self.sidebar.currentRowChanged.connect(self._on_page_changed)
        self.sidebar.setFocusPolicy(Qt.NoFocus)

        self.content_stack = QStackedWidget()
        self.content_stack.setObjectName("settingsContent")

        content_layout.addWidget(self.sidebar)
        content_layout.addWidget(self.content_stack)
        main_layout.addLayout(content_layout)

        # ============================================================
        # Bottom Button Bar
        # ============================================================
        button_layout = QHBoxLayout()
        button_layout.setContentsMargins(16, 16, 16, 16)
        button_layout.setSpacing(8)

        self.restore_btn = QPushButton("Restore Defaults")
        self.restore_btn.setObjectName("restoreDefaultsBtn")
        self.restore_btn.clicked.connect(self._on_restore_defaults)

        self.close_btn = QPushButton("Close")
        self.close_btn.setObjectName("closeBtn")
        self.close_btn.setDefault(True)
        self.close_btn.clicked.connect(self.accept)

        button_layout.addWidget(self.restore_btn)
        button_layout.addStretch()
        button_layout.addWidget(self.close_btn)

        main_layout.addLayout(button_layout)

    def _create_pages(self) -> None:
        """Create preference pages and add them to sidebar/stack."""
        self.appearance_panel = AppearanceSettingsPanel(
            store=self.controller,
            font_picker=self.font_picker,
            view_factory=AppearanceSettingsPage
        )

        self.pages: List[AppearanceSettingsPanel] = [self.appearance_panel]

        def create_scrollable_page(page_widget):
            """Wrap a page widget in a scroll area."""
            scroll = QScrollArea()
            scroll.setWidget(page_widget)
            scroll.setWidgetResizable(True)
            scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
            scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)
            scroll.setFrameShape(QScrollArea.NoFrame)
            return scroll

        for page in self.pages:
            item = QListWidgetItem(QIcon.fromTheme(page.toolbar_icon), page.toolbar_label)
            item.setData(Qt.ItemDataRole.UserRole, page.identifier)
            self.sidebar.addItem(item)
            self.content_stack.addWidget(create_scrollable_page(page.root_view()))

        self.sidebar.setCurrentRow(0)

    def _setup_shortcuts(self) -> None:
        """Setup keyboard shortcuts for dialog."""
        close_shortcut = QShortcut(QKeySequence("Esc"), self)
        close_shortcut.activated.connect(self.accept)

    def _on_page_changed(self, index: int) -> None:
        """Show the page matching the selected sidebar row."""
        if index >= 0:
            self.content_stack.setCurrentIndex(index)

    def _reload_all_pages(self) -> None:
        """Reload every page from the controller."""
        for page in self.pages:
            page.reload()

    def _on_restore_defaults(self) -> None:
        """Confirm and reset all settings to defaults."""
        reply = QMessageBox.question(
            self,
            "Restore Defaults",
            "Reset all appearance settings to default values?\n\n"
            "This will restore:\n"
            "• Article and folder fonts\n"
            "• Minimum font size\n"
            "• Folder images",
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No
        )

        if reply == QMessageBox.Yes:
            # appearance_changed reloads the pages
            self.controller.reset_to_defaults()
