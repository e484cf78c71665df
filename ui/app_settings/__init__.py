"""
Preferences UI Components

Provides a preferences window with sidebar navigation and the Appearance page
(article/folder fonts, minimum font size, folder images).

This package uses dependency injection - the AppSettingsController is passed
to the window rather than being a singleton. This makes testing easier
and dependencies explicit.
"""

from .app_settings_dialog import AppSettingsDialog
from .appearance_page import AppearanceSettingsPage
from .font_picker import QtFontPicker

__all__ = [
    'AppSettingsDialog',
    'AppearanceSettingsPage',
    'QtFontPicker'
]
