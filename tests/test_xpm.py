import pytest

from minigfx.image import new_image
from minigfx.xpm import (
    XpmError,
    images_equal,
    parse_xpm,
    quoted_lines,
    xpm_file_to_image,
    xpm_to_image,
)

SIMPLE = [
    "2 2 2 1",
    "a c #FF0000",
    "b c blue",
    "ab",
    "ba",
]

SIMPLE_FILE = """/* XPM */
static char *simple_xpm[] = {
/* width height colours cpp */
"2 2 2 1",
"a c #FF0000",
"b c blue",
// pixels
"ab",
"ba"
};
"""


def test_xpm_to_image_size_and_pixels():
    image = xpm_to_image(SIMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF
    assert image.get_pixel(0, 1) == 0xFF
    assert image.get_pixel(1, 1) == 0xFF0000


def test_none_colour_is_transparent():
    image = parse_xpm(["1 1 1 1", ". c None", "."])
    assert image.get_pixel(0, 0) == 0xFF000000


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "x c light grey", "x"])
    assert image.get_pixel(0, 0) == 0xD3D3D3


def test_unknown_pixel_code_is_zero():
    image = parse_xpm(["2 1 1 1", "a c #FFFFFF", "az"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


def test_single_char_codes_later_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #FF0000", "a c #00FF00", "a"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_three_char_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #FF0000", "abc c #00FF00", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_two_char_codes():
    image = parse_xpm(["2 1 2 2", "aa c #0000FF", "bb c #FF0000", "bbaa"])
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x0000FF


def test_quoted_lines_extracts_strings():
    text = 'x "one" y "two three" z "unterminated'
    assert list(quoted_lines(text)) == ["one", "two three"]


def test_file_round_trip_matches_array(tmp_path):
    path = tmp_path / "simple.xpm"
    path.write_text(SIMPLE_FILE, encoding="latin-1")
    from_file = xpm_file_to_image(path)
    from_array = xpm_to_image(SIMPLE)
    assert images_equal(from_file, from_array)
    assert from_file.data == from_array.data


def test_comment_marker_inside_string_is_kept(tmp_path):
    path = tmp_path / "slash.xpm"
    path.write_text('"1 1 1 1",\n"/ c #00FF00",\n"/"\n', encoding="latin-1")
    image = xpm_file_to_image(path)
    assert image.get_pixel(0, 0) == 0x00FF00


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", "a c #000000", "a", "a"],
        ["2 2 1", "a c #000000", "aa", "aa"],
        ["abc"],
        [],
    ],
)
def test_bad_header_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_colour_line_without_c_key_raises():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a m #000000", "a"])


def test_colour_line_without_value_raises():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a c", "a"])


def test_missing_rows_raise():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c #000000", "a"])


def test_short_row_raises():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", "a c #000000", "aa"])


def test_negative_size_raises():
    with pytest.raises(XpmError):
        parse_xpm(["-1 1 1 1", "a c #000000", "a"])


def test_xpm_to_image_rejects_plain_string():
    with pytest.raises(TypeError):
        xpm_to_image("1 1 1 1")


def test_images_equal_compares_layout():
    assert images_equal(new_image(4, 3), new_image(4, 3))
    assert not images_equal(new_image(4, 3), new_image(3, 4))
    assert not images_equal(new_image(4, 3), new_image(4, 3, byte_order=1))
    assert not images_equal(new_image(4, 3), new_image(4, 3, bits_per_pixel=16))