import math
from dataclasses import dataclass
from typing import Tuple, Union


# Candidate sizes offered by the minimum font size selector, in display order
MINIMUM_FONT_SIZES: Tuple[int, ...] = (9, 10, 11, 12, 14, 18, 24, 36)

DEFAULT_FONT_FAMILY = "Helvetica"
DEFAULT_FONT_SIZE = 12
DEFAULT_MINIMUM_FONT_SIZE = 9
DEFAULT_SHOW_FOLDER_IMAGES = True


def format_point_size(size: Union[int, float]) -> str:
    """Format a point size without a trailing '.0' for integral values."""
    return f"{size:g}"


@dataclass(frozen=True)
class FontChoice:
    """A font selection: family name plus point size."""

    family: str
    size: float

    def __post_init__(self):
        if not isinstance(self.family, str) or not self.family.strip():
            raise ValueError("font family must be a non-empty string")
        if isinstance(self.size, bool) or not isinstance(self.size, (int, float)):
            raise ValueError("font size must be a number")
        if not math.isfinite(self.size) or self.size <= 0:
            raise ValueError("font size must be a positive finite number")

    @property
    def sample_text(self) -> str:
        """Preview label text, e.g. 'Helvetica 12 pt'."""
        return f"{self.family} {format_point_size(self.size)} pt"

    def __str__(self) -> str:
        return self.sample_text


@dataclass(frozen=True)
class MinimumFontSizePreference:
    """
    Minimum font size enforcement.

    The size is kept while enforcement is off so that turning it back on
    restores the previous value.
    """

    enabled: bool
    size: int = DEFAULT_MINIMUM_FONT_SIZE

    def __post_init__(self):
        if not isinstance(self.enabled, bool):
            raise ValueError("enabled must be a bool")
        if not is_valid_minimum_size(self.size):
            raise ValueError(
                f"minimum font size must be one of {list(MINIMUM_FONT_SIZES)}, got {self.size!r}"
            )

    def with_enabled(self, enabled: bool) -> 'MinimumFontSizePreference':
        return MinimumFontSizePreference(enabled=enabled, size=self.size)

    def with_size(self, size: int) -> 'MinimumFontSizePreference':
        return MinimumFontSizePreference(enabled=self.enabled, size=size)


@dataclass(frozen=True)
class FolderImagesPreference:
    """Whether folder icons are shown in the folder list."""
    visible: bool = DEFAULT_SHOW_FOLDER_IMAGES


def is_valid_minimum_size(size) -> bool:
    """True when size is one of the enumerated candidate sizes."""
    return isinstance(size, int) and not isinstance(size, bool) and size in MINIMUM_FONT_SIZES


DEFAULT_ARTICLE_FONT = FontChoice(DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE)
DEFAULT_FOLDER_FONT = FontChoice(DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE)
DEFAULT_MINIMUM_FONT_SIZE_PREFERENCE = MinimumFontSizePreference(
    enabled=False,
    size=DEFAULT_MINIMUM_FONT_SIZE
)
