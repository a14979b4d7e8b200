"""Substring search, word splitting and comment stripping for XPM text."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _until_nul(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def str_find(text: str, needle: str, length: int) -> int:
    """Return the offset of the first ``needle`` in ``text``, or -1.

    ``length`` is the size the caller claims for ``text``; a needle longer
    than that is never found. The search stops at a NUL character.
    """
    if len(needle) > length:
        return -1
    return _until_nul(text).find(needle)


def str_find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`str_find`, but skip matches inside double quotes."""
    if len(needle) > length:
        return -1
    text = _until_nul(text)
    last_start = len(text) - len(needle)
    quoted = False
    for pos, char in enumerate(text[: last_start + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(_until_nul(text)) if word]


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Blank out C-style comments lying outside quoted strings.

    Comments are replaced by spaces so that the text keeps its length.
    A line comment is blanked together with the newline ending it.
    """
    size = len(text)
    while (begin := str_find_unquoted(text, "/*", size)) != -1:
        end = str_find(text[begin + 2:], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := str_find_unquoted(text, "//", size)) != -1:
        end = str_find(text[begin + 2:], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text