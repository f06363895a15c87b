# topmark:header:start
#
#   project      : PropLay
#   file         : comments.py
#   file_relpath : src/proplay/layout/comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment normalization for properties layouts.

Comments are stored the way they were read: one string per comment block, the
lines joined with ``"\\n"`` and every line keeping its original ``#`` / ``!``
prefix. Canonical forms are derived on demand:

* without comment characters (``enforce_comment_char=False``) for display and
  for comparing comments, and
* with comment characters enforced (``enforce_comment_char=True``) for writing,
  so that plain lines set through the API still end up as comments in the file.

Blank and whitespace-only lines are never touched: inside a block they stand
for blank lines that belong to the comment.
"""

from __future__ import annotations

from proplay.constants import COMMENT_CHARS, COMMENT_PREFIX, CR


def is_comment_line(line: str) -> bool:
    """Return True if ``line`` is a comment line.

    A line counts as a comment when it is empty after stripping whitespace or
    when its first non-blank character is a comment character.

    Args:
        line (str): A single line without its line terminator.

    Returns:
        bool: True for comment (and blank) lines.
    """
    s: str = line.strip()
    return s == "" or s[0] in COMMENT_CHARS


def strip_comment_char(line: str, enforce_comment_char: bool) -> str:
    """Add or remove the comment character of a single line.

    Args:
        line (str): The comment line.
        enforce_comment_char (bool): If True, make sure the line is a comment by
            prefixing ``"# "`` when needed; if False, remove the comment character
            together with surrounding whitespace.

    Returns:
        str: The converted line. Blank lines are returned unchanged.
    """
    if line.strip() == "" or is_comment_line(line) == enforce_comment_char:
        return line

    if not enforce_comment_char:
        pos = 0
        while line[pos] not in COMMENT_CHARS:
            pos += 1
        pos += 1
        while pos < len(line) and line[pos].isspace():
            pos += 1
        return line[pos:]

    return COMMENT_PREFIX + line


def trim_comment(raw: str, enforce_comment_char: bool) -> str:
    r"""Convert every line of a (multi-line) comment.

    Lines are separated by ``"\n"``; a trailing ``"\n"`` is preserved so that
    a blank line belonging to the comment survives the conversion.

    Args:
        raw (str): The comment text.
        enforce_comment_char (bool): See `strip_comment_char`.

    Returns:
        str: The converted comment.
    """
    return CR.join(strip_comment_char(line, enforce_comment_char) for line in raw.split(CR))


def canonical_comment(comment: str | None, enforce_comment_char: bool) -> str | None:
    """Return the canonical form of a stored comment, or None if there is none."""
    if comment is None:
        return None
    return trim_comment(comment, enforce_comment_char)


def merge_comments(first: str | None, second: str | None) -> str | None:
    """Concatenate two comment blocks in order, skipping missing ones."""
    if second is None:
        return first
    if first is None:
        return second
    return first + CR + second
