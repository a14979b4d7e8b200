import pytest

from minigfx.strings import split_words, str_find, str_find_unquoted, strip_comments


@pytest.mark.parametrize(
    "text, needle",
    [("hello world", "world"), ("aaab", "ab"), ("xyz", "x"), ('a"b"', '"')],
)
def test_str_find_returns_first_match(text, needle):
    pos = str_find(text, needle, len(text))
    assert text[pos:pos + len(needle)] == needle
    assert needle not in text[: pos + len(needle) - 1]


def test_str_find_missing_gives_minus_one():
    assert str_find("abcdef", "xyz", 6) == -1


def test_str_find_needle_longer_than_length():
    assert str_find("abcdef", "abc", 2) == -1


def test_str_find_stops_at_nul():
    assert str_find("abc\0def", "def", 7) == -1


def test_str_find_unquoted_skips_quoted_match():
    text = '"/*" x /*'
    pos = str_find_unquoted(text, "/*", len(text))
    assert text[pos:pos + 2] == "/*"
    assert pos > text.rindex('"')


def test_str_find_unquoted_only_quoted_gives_minus_one():
    text = 'a "//" b'
    assert str_find_unquoted(text, "//", len(text)) == -1


def test_str_find_unquoted_matches_outside_quotes_first():
    text = '// "x"'
    assert str_find_unquoted(text, "//", len(text)) == 0


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_strip_block_comment_keeps_length():
    text = "a /* x */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["a", "b"]


def test_strip_line_comment_blanks_newline():
    text = "x // c\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.split() == ["x", "y"]


def test_strip_leaves_quoted_text():
    text = '"/* keep */" "// too"'
    assert strip_comments(text) == text


def test_strip_unterminated_block_comment():
    assert strip_comments("/* abc") == "   abc"