from .appearance import (
    FontChoice, MinimumFontSizePreference, FolderImagesPreference,
    MINIMUM_FONT_SIZES, DEFAULT_MINIMUM_FONT_SIZE
)

__all__ = [
    'FontChoice', 'MinimumFontSizePreference', 'FolderImagesPreference',
    'MINIMUM_FONT_SIZES', 'DEFAULT_MINIMUM_FONT_SIZE'
]
