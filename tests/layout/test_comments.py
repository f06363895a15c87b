# topmark:header:start
#
#   project      : PropLay
#   file         : test_comments.py
#   file_relpath : tests/layout/test_comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment helpers: line classification, prefix handling and merging."""

from __future__ import annotations

from proplay.layout.comments import (
    canonical_comment,
    is_comment_line,
    merge_comments,
    strip_comment_char,
)
from tests.conftest import parametrize


@parametrize(
    "line, expected",
    [
        ("# comment", True),
        ("! comment", True),
        ("   #indented", True),
        ("", True),
        ("  \t", True),
        ("key = value", False),
        ("key#value", False),
    ],
)
def test_is_comment_line(line: str, expected: bool) -> None:
    """Blank, whitespace-only and ``#``/``!`` lines are comment lines."""
    assert is_comment_line(line) is expected


def test_strip_comment_char_removes_prefix_and_spaces() -> None:
    """The comment character and the whitespace around it are dropped."""
    assert strip_comment_char("  #   text", False) == "text"
    assert strip_comment_char("!text", False) == "text"


def test_strip_comment_char_keeps_plain_text() -> None:
    """A line without comment character is untouched when not enforcing."""
    assert strip_comment_char("text", False) == "text"


def test_strip_comment_char_enforces_prefix() -> None:
    """A plain line gets ``# `` when enforcing; comment lines stay as they are."""
    assert strip_comment_char("text", True) == "# text"
    assert strip_comment_char("! text", True) == "! text"


def test_strip_comment_char_blank_lines_untouched() -> None:
    """Blank and whitespace-only lines are returned unchanged either way."""
    for line in ("", "   "):
        assert strip_comment_char(line, True) == line
        assert strip_comment_char(line, False) == line


def test_canonical_comment_none() -> None:
    """A missing comment stays missing."""
    assert canonical_comment(None, True) is None
    assert canonical_comment(None, False) is None


def test_canonical_comment_multi_line() -> None:
    """Each line of a stored comment is converted on its own."""
    assert canonical_comment("# a\n\n! b", False) == "a\n\nb"
    assert canonical_comment("a\n\nb", True) == "# a\n\n# b"


def test_merge_comments() -> None:
    """Blocks are concatenated in order; missing blocks are skipped."""
    assert merge_comments("# a", "# b") == "# a\n# b"
    assert merge_comments(None, "# b") == "# b"
    assert merge_comments("# a", None) == "# a"
    assert merge_comments(None, None) is None
