"""Reading XPM pixmaps, from files or from in-memory line arrays."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

from .colors import text_to_rgb
from .image import Image, new_image
from .strings import split_words, strip_comments

TRANSPARENT = 0xFF000000
_NONE_COLOR = -1
_ATOI = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _color_key(chars: str) -> int:
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def quoted_lines(text: str) -> Iterator[str]:
    """Yield, in order, the contents of each double-quoted string in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"XPM data ends before the {what}")
    return line


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if 0 in values:
        raise XpmError(f"bad XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_color(line: str, cpp: int) -> tuple[int, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return _color_key(line[:cpp]), text_to_rgb(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    The first string is the header "width height colours chars-per-pixel",
    followed by one string per colour and one per pixel row. Pixels of
    colour "none" are stored as 0xFF000000; unknown pixel codes give 0.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))

    # With one or two characters per pixel a later definition of a code
    # replaces an earlier one; with more, the first definition is kept.
    direct = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(ncolors):
        key, color = _read_color(_next_line(source, "colour table end"), cpp)
        if direct:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    try:
        image = new_image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc

    for y in range(height):
        row = _next_line(source, "last pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x in range(width):
            code = row[x * cpp:(x + 1) * cpp]
            color = palette.get(_color_key(code), 0)
            if color == _NONE_COLOR:
                color = TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(lines: Sequence[str]) -> Image:
    """Build an image from an XPM data array, one string per entry."""
    if isinstance(lines, str):
        raise TypeError("expected a sequence of XPM strings, not a single string")
    return parse_xpm(lines)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from it.

    Comments outside quoted strings are ignored. Raises OSError when the
    file cannot be read and XpmError when its contents are not valid.
    """
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))


def images_equal(first: Image, second: Image) -> bool:
    """Tell whether two images share size and pixel layout."""
    return (
        first.width == second.width
        and first.height == second.height
        and first.format == second.format
        and first.byte_order == second.byte_order
        and first.size_line == second.size_line
        and first.bits_per_pixel == second.bits_per_pixel
    )