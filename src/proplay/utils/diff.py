# topmark:header:start
#
#   project      : PropLay
#   file         : diff.py
#   file_relpath : src/proplay/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between the current and the updated text of a file.

Commands that preview an edit (`set`, `unset` without ``--apply``) and
`check -v` show such a diff. With color enabled, line breaks other than
``\\n`` are made visible so CRLF files can be told apart.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING, Callable

from yachalk import chalk

from proplay.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from proplay.config.logging import ProplayLogger

logger: ProplayLogger = get_logger(__name__)

# Color of a diff line, by its first character.
_LINE_STYLES: dict[str, Callable[[str], str]] = {
    "-": chalk.bold.red,
    "+": chalk.bold.green,
    "@": chalk.cyan,
}


def make_patch(original: str, updated: str, name: str) -> list[str]:
    """Return the unified diff from ``original`` to ``updated``.

    Args:
        original (str): Current file content.
        updated (str): Proposed file content.
        name (str): File name shown in the diff header.

    Returns:
        list[str]: The diff lines with their line breaks; empty for equal texts.
    """
    patch: list[str] = list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (current)",
            tofile=f"{name} (updated)",
        )
    )
    logger.debug("Diff of %s: %d lines", name, len(patch))
    return patch


def _visible(line: str) -> str:
    return line.rstrip("\n").replace("\r", "\\r")


def format_patch(patch: Sequence[str], *, color: bool = False, line_numbers: bool = False) -> str:
    """Return ``patch`` as printable text, one diff line per output line.

    Args:
        patch (Sequence[str]): Lines as returned by `make_patch`.
        color (bool): Color the lines with `yachalk` and show carriage returns as ``\\r``.
        line_numbers (bool): Prefix each line with its position in the diff.
    """
    out: list[str] = []
    for number, line in enumerate(patch, 1):
        if color:
            text: str = _LINE_STYLES.get(line[:1], chalk.white)(_visible(line))
        else:
            text = line.rstrip("\r\n")
        out.append(f"{number:>4} {text}\n" if line_numbers else f"{text}\n")
    return "".join(out)
