from .app_settings import AppSettingsDialog, AppearanceSettingsPage, QtFontPicker

__all__ = ['AppSettingsDialog', 'AppearanceSettingsPage', 'QtFontPicker']
