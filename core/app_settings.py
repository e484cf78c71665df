"""
Application Settings Controller

Manages persistent appearance preferences using QSettings with signal-based notifications.
NOT a singleton - create once at startup and pass to components via dependency injection.

Settings Categories:
- Fonts: Article list font, folder list font
- Minimum font size: Enforcement flag and floor size
- Folders: Folder image visibility
"""
from typing import Optional, Union

from PySide6.QtCore import QObject, Signal, QSettings
from models.appearance import (
    FontChoice, MinimumFontSizePreference,
    DEFAULT_ARTICLE_FONT, DEFAULT_FOLDER_FONT,
    DEFAULT_MINIMUM_FONT_SIZE_PREFERENCE, DEFAULT_SHOW_FOLDER_IMAGES,
    is_valid_minimum_size
)
from utils.logger import logger


class SettingsKeys:
    """
    Centralized string constants for QSettings keys.

    All keys use category/setting_name format for organization.
    """

    # Fonts
    ARTICLE_FONT_FAMILY = "appearance/article_font_family"
    ARTICLE_FONT_SIZE = "appearance/article_font_size"
    FOLDER_FONT_FAMILY = "appearance/folder_font_family"
    FOLDER_FONT_SIZE = "appearance/folder_font_size"

    # Minimum font size
    MINIMUM_FONT_SIZE_ENABLED = "appearance/minimum_font_size_enabled"
    MINIMUM_FONT_SIZE = "appearance/minimum_font_size"

    # Folders
    SHOW_FOLDER_IMAGES = "appearance/show_folder_images"


class AppSettingsController(QObject):
    """
    Controller for appearance preferences with signal-based change notifications.

    This is NOT a singleton - create once in main() and inject into
    components that need access to settings.

    Inherits from QObject to emit signals when settings change, so the
    article list, folder list and open preference pages can react without
    tight coupling.

    Usage:
        self.app_settings = AppSettingsController()
        dialog = AppSettingsDialog(controller=self.app_settings)

        # Listen to changes
        self.app_settings.article_font_changed.connect(self._on_article_font_changed)
    """

    # Per-preference signals carry the new value
    article_font_changed = Signal(object)
    folder_font_changed = Signal(object)
    minimum_font_size_changed = Signal(object)
    folder_images_changed = Signal(bool)

    # Emitted after any appearance change, including reset_to_defaults()
    appearance_changed = Signal()

    def __init__(self, settings: Optional[QSettings] = None):
        """
        Initialize settings controller.

        Args:
            settings: Optional QSettings instance. If None, creates default
                     QSettings for "FeedReader". Pass custom instance for testing.
        """
        super().__init__()
        self.settings = settings or QSettings("FeedReader", "Preferences")

    # ============================================================
    # Raw value helpers
    # ============================================================

    def _get_str(self, key: str, default: str) -> str:
        value = self.settings.value(key, default)
        if value is None:
            return default
        return value if isinstance(value, str) else str(value)

    def _get_number(self, key: str, default: Union[int, float]) -> Union[int, float, None]:
        """Read a numeric value, returning None when the stored value is not a number."""
        value = self.settings.value(key, default)
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return int(number) if number.is_integer() else number

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes"}
        try:
            return bool(int(value))
        except (TypeError, ValueError):
            return default

    def _read_font(self, family_key: str, size_key: str, default: FontChoice) -> FontChoice:
        family = self._get_str(family_key, default.family)
        size = self._get_number(size_key, default.size)
        try:
            return FontChoice(family, size)
        except ValueError as e:
            logger.warning(
                f"Ignoring stored font {family!r}/{size!r} ({e}), using {default}",
                source="AppSettings"
            )
            return default

    def _write_font(self, family_key: str, size_key: str, font: FontChoice) -> None:
        if not isinstance(font, FontChoice):
            raise ValueError("font must be a FontChoice")
        self.settings.setValue(family_key, font.family)
        self.settings.setValue(size_key, font.size)
        self.settings.sync()

    # ============================================================
    # FONT SETTINGS
    # ============================================================

    def get_article_font(self) -> FontChoice:
        """
        Get the article list font.

        Returns:
            Stored FontChoice (default Helvetica 12)
        """
        return self._read_font(
            SettingsKeys.ARTICLE_FONT_FAMILY,
            SettingsKeys.ARTICLE_FONT_SIZE,
            DEFAULT_ARTICLE_FONT
        )

    def set_article_font(self, font: FontChoice) -> None:
        """
        Set the article list font.

        Raises:
            ValueError: If font is not a FontChoice
        """
        self._write_font(SettingsKeys.ARTICLE_FONT_FAMILY, SettingsKeys.ARTICLE_FONT_SIZE, font)
        self.article_font_changed.emit(font)
        self.appearance_changed.emit()

    def get_folder_font(self) -> FontChoice:
        """
        Get the folder list font.

        Returns:
            Stored FontChoice (default Helvetica 12)
        """
        return self._read_font(
            SettingsKeys.FOLDER_FONT_FAMILY,
            SettingsKeys.FOLDER_FONT_SIZE,
            DEFAULT_FOLDER_FONT
        )

    def set_folder_font(self, font: FontChoice) -> None:
        """
        Set the folder list font.

        Raises:
            ValueError: If font is not a FontChoice
        """
        self._write_font(SettingsKeys.FOLDER_FONT_FAMILY, SettingsKeys.FOLDER_FONT_SIZE, font)
        self.folder_font_changed.emit(font)
        self.appearance_changed.emit()

    # ============================================================
    # MINIMUM FONT SIZE
    # ============================================================

    def get_minimum_font_size(self) -> MinimumFontSizePreference:
        """
        Get minimum font size enforcement.

        Returns:
            MinimumFontSizePreference (default disabled, 9pt)
        """
        default = DEFAULT_MINIMUM_FONT_SIZE_PREFERENCE
        enabled = self._get_bool(SettingsKeys.MINIMUM_FONT_SIZE_ENABLED, default.enabled)
        size = self._get_number(SettingsKeys.MINIMUM_FONT_SIZE, default.size)

        if not is_valid_minimum_size(size):
            logger.warning(
                f"Ignoring stored minimum font size {size!r}, using {default.size}",
                source="AppSettings"
            )
            size = default.size

        return MinimumFontSizePreference(enabled=enabled, size=size)

    def set_minimum_font_size(self, value: MinimumFontSizePreference) -> None:
        """
        Set minimum font size enforcement (flag and size together).

        Raises:
            ValueError: If value is not a MinimumFontSizePreference
        """
        if not isinstance(value, MinimumFontSizePreference):
            raise ValueError("minimum_font_size must be a MinimumFontSizePreference")

        self.settings.setValue(SettingsKeys.MINIMUM_FONT_SIZE_ENABLED, value.enabled)
        self.settings.setValue(SettingsKeys.MINIMUM_FONT_SIZE, value.size)
        self.settings.sync()
        self.minimum_font_size_changed.emit(value)
        self.appearance_changed.emit()

    # ============================================================
    # FOLDER IMAGES
    # ============================================================

    def get_show_folder_images(self) -> bool:
        return self._get_bool(SettingsKeys.SHOW_FOLDER_IMAGES, DEFAULT_SHOW_FOLDER_IMAGES)

    def set_show_folder_images(self, visible: bool) -> None:
        if not isinstance(visible, bool):
            raise ValueError("show_folder_images must be a bool")
        self.settings.setValue(SettingsKeys.SHOW_FOLDER_IMAGES, visible)
        self.settings.sync()
        self.folder_images_changed.emit(visible)
        self.appearance_changed.emit()

    # ============================================================
    # UTILITY METHODS
    # ============================================================

    def reset_to_defaults(self) -> None:
        """
        Clear all settings and revert to defaults.

        Emits all change signals to notify components.
        """
        self.settings.clear()
        self.settings.sync()
        logger.info("Appearance settings reset to defaults", source="AppSettings")

        self.article_font_changed.emit(self.get_article_font())
        self.folder_font_changed.emit(self.get_folder_font())
        self.minimum_font_size_changed.emit(self.get_minimum_font_size())
        self.folder_images_changed.emit(self.get_show_folder_images())
        self.appearance_changed.emit()

    def get_all_settings(self) -> dict:
        """
        Get all current settings as a dictionary.

        Useful for debugging or displaying current configuration.
        """
        minimum = self.get_minimum_font_size()
        return {
            'article_font': str(self.get_article_font()),
            'folder_font': str(self.get_folder_font()),
            'minimum_font_size_enabled': minimum.enabled,
            'minimum_font_size': minimum.size,
            'show_folder_images': self.get_show_folder_images()
        }

    def __repr__(self) -> str:
        """String representation showing all current settings."""
        settings = self.get_all_settings()
        settings_str = "\n  ".join(f"{k}: {v}" for k, v in settings.items())
        return f"AppSettingsController(\n  {settings_str}\n)"
