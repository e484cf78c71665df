from .app_settings import SettingsKeys, AppSettingsController
from .appearance_panel import AppearanceSettingsPanel, AppearanceStore, AppearanceView, FontPicker

__all__ = [
    'SettingsKeys', 'AppSettingsController',
    'AppearanceSettingsPanel', 'AppearanceStore', 'AppearanceView', 'FontPicker'
]
