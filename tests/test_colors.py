import pytest

from minigfx.colors import lookup_color, text_to_rgb


def test_lookup_pinned_values_from_table():
    assert lookup_color("snow") == 0xFFFAFA
    assert lookup_color("thistle") == 0xD8BFD8
    assert lookup_color("black") == 0


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert text_to_rgb("None") == -1


def test_lookup_ignores_case():
    assert lookup_color("GhOsT WhItE") == lookup_color("ghost white")
    assert lookup_color("RED") == lookup_color("red")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_spaced_and_joined_names_agree():
    for spaced in ("white smoke", "navajo white", "royal blue", "hot pink"):
        assert lookup_color(spaced) == lookup_color(spaced.replace(" ", ""))


@pytest.mark.parametrize("percent", range(0, 101))
def test_gray_and_grey_spellings_match(percent):
    value = lookup_color(f"gray{percent}")
    assert lookup_color(f"grey{percent}") == value
    red, green, blue = value >> 16, (value >> 8) & 0xFF, value & 0xFF
    assert red == green == blue


def test_gray_levels_increase():
    levels = [lookup_color(f"gray{percent}") for percent in range(101)]
    assert levels == sorted(levels)
    assert levels[0] == lookup_color("black")
    assert levels[-1] == lookup_color("white")


def test_first_shade_matches_base_name():
    for family in ("red", "green", "blue", "snow", "orange", "magenta"):
        assert lookup_color(f"{family}1") == lookup_color(family)


def test_text_to_rgb_hex_spec():
    assert text_to_rgb("#ff0000") == 0xFF0000
    assert text_to_rgb("#00FF00", "ignored") == 0x00FF00


def test_text_to_rgb_hex_stops_at_invalid_digit():
    assert text_to_rgb("#12zz") == 0x12


def test_text_to_rgb_hex_without_digits_is_zero():
    assert text_to_rgb("#") == 0
    assert text_to_rgb("#xyz") == 0


def test_text_to_rgb_joins_suffix_with_space():
    assert text_to_rgb("light", "green") == lookup_color("light green")
    assert text_to_rgb("dark", "red") == lookup_color("darkred")


def test_text_to_rgb_without_suffix():
    assert text_to_rgb("Gold") == lookup_color("gold")


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour") == 0
    assert text_to_rgb("white", "nothing") == 0