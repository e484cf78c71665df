import pytest

from models.appearance import (
    FontChoice, MinimumFontSizePreference, FolderImagesPreference,
    MINIMUM_FONT_SIZES, DEFAULT_MINIMUM_FONT_SIZE, is_valid_minimum_size
)


def test_sample_text_shows_family_and_size():
    assert FontChoice("Georgia", 14).sample_text == "Georgia 14 pt"
    assert FontChoice("Menlo", 10.5).sample_text == "Menlo 10.5 pt"
    assert FontChoice("Menlo", 12.0).sample_text == "Menlo 12 pt"


def test_font_choice_equality_ignores_int_float():
    assert FontChoice("Georgia", 12) == FontChoice("Georgia", 12.0)


@pytest.mark.parametrize("family, size", [
    ("", 12), ("   ", 12), ("Georgia", 0), ("Georgia", -3), ("Georgia", None),
    ("Georgia", float("nan")), ("Georgia", float("inf")), ("Georgia", float("-inf")),
])
def test_font_choice_rejects_invalid_values(family, size):
    with pytest.raises(ValueError):
        FontChoice(family, size)


def test_candidate_sizes_are_ordered_and_include_default():
    assert list(MINIMUM_FONT_SIZES) == sorted(MINIMUM_FONT_SIZES)
    assert DEFAULT_MINIMUM_FONT_SIZE in MINIMUM_FONT_SIZES
    assert min(MINIMUM_FONT_SIZES) == 9 and max(MINIMUM_FONT_SIZES) == 36


def test_minimum_size_must_be_a_candidate():
    with pytest.raises(ValueError):
        MinimumFontSizePreference(enabled=True, size=13)
    with pytest.raises(ValueError):
        MinimumFontSizePreference(enabled="yes", size=12)
    assert not is_valid_minimum_size(True)
    assert not is_valid_minimum_size(None)
    assert is_valid_minimum_size(14)


def test_minimum_size_toggle_keeps_size():
    pref = MinimumFontSizePreference(enabled=True, size=18)
    off = pref.with_enabled(False)
    assert off == MinimumFontSizePreference(enabled=False, size=18)
    assert off.with_enabled(True) == pref
    assert pref.with_size(24).enabled is True


def test_folder_images_default_visible():
    assert FolderImagesPreference().visible is True
