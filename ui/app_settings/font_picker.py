"""
Font Picker

QFontDialog adapter used by the Appearance page to choose article and folder fonts,
plus the FontChoice <-> QFont conversions shared by the preview labels.
"""

from typing import Optional

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QFontDialog, QWidget

from models.appearance import FontChoice


def to_qfont(choice: FontChoice) -> QFont:
    """Build a QFont rendering the given family and point size."""
    font = QFont(choice.family)
    font.setPointSizeF(float(choice.size))
    return font


FALLBACK_LOGICAL_DPI = 96.0


def logical_dpi() -> float:
    """Logical DPI of the primary screen, used to turn pixel sizes into points."""
    screen = QGuiApplication.primaryScreen()
    if screen is None:
        return FALLBACK_LOGICAL_DPI
    return screen.logicalDotsPerInch() or FALLBACK_LOGICAL_DPI


def from_qfont(font: QFont) -> FontChoice:
    """Convert a QFont back to a FontChoice (integral sizes become int)."""
    size = font.pointSizeF()
    if size <= 0:
        # Pixel-sized fonts report -1 for the point size
        size = round(font.pixelSize() * 72.0 / logical_dpi(), 1)
    return FontChoice(font.family(), int(size) if size.is_integer() else size)


class QtFontPicker:
    """
    System font picker backed by QFontDialog.

    Runs the dialog modally and returns the confirmed FontChoice, or None
    when the user cancels.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        self.parent = parent

    def pick_font(self, initial: FontChoice, title: str) -> Optional[FontChoice]:
        ok, font = QFontDialog.getFont(to_qfont(initial), self.parent, title)
        if not ok:
            return None
        return from_qfont(font)
