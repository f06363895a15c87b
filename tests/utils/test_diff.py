# topmark:header:start
#
#   project      : PropLay
#   file         : test_diff.py
#   file_relpath : tests/utils/test_diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: patch creation and colorized rendering."""

from __future__ import annotations

from proplay.utils.diff import format_patch, make_patch


def test_make_patch_equal_texts_is_empty() -> None:
    """Identical texts produce no diff lines."""
    assert make_patch("a = 1\n", "a = 1\n", "x.properties") == []


def test_make_patch_headers_and_changes() -> None:
    """The diff names both versions and shows the changed line."""
    patch: list[str] = make_patch("a = 1\nb = 2\n", "a = 1\nb = 3\n", "x.properties")
    assert patch[0].startswith("--- x.properties (current)")
    assert patch[1].startswith("+++ x.properties (updated)")
    assert "-b = 2\n" in patch
    assert "+b = 3\n" in patch


def test_format_patch_plain() -> None:
    """Without color the diff lines are printed as they are."""
    patch: list[str] = make_patch("a = 1\n", "a = 2\n", "x.properties")
    text: str = format_patch(patch)
    assert "-a = 1\n+a = 2\n" in text
    assert "\x1b[" not in text


def test_format_patch_line_numbers() -> None:
    """Line numbers count the diff lines from one."""
    text: str = format_patch(["--- a\n", "+++ b\n", "-foo\n", "+bar\n"], line_numbers=True)
    assert text.splitlines()[2] == "   3 -foo"


def test_format_patch_color_shows_carriage_returns() -> None:
    """Colored output makes carriage returns visible."""
    patch: list[str] = make_patch("a = 1\r\n", "a = 2\r\n", "crlf.properties")
    assert "a = 2\\r" in format_patch(patch, color=True)


def test_format_patch_empty() -> None:
    """An empty diff formats to an empty string."""
    assert format_patch([]) == ""
