# topmark:header:start
#
#   project      : PropLay
#   file         : errors.py
#   file_relpath : src/proplay/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the PropLay layout engine.

All library errors derive from `ProplayError` so callers can catch them in one
place. CLI-specific exceptions live in `proplay.cli.errors` and wrap these.
"""

from __future__ import annotations

from collections.abc import Sequence


class ProplayError(Exception):
    """Base class for all PropLay errors."""


class PropertiesParseError(ProplayError):
    """Malformed properties input (bad property line, unterminated continuation).

    Attributes:
        source (str | None): Name of the source being read, if known.
        line_number (int | None): 1-based physical line number of the offending line.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.source = source
        self.line_number = line_number
        location: str = source or "<stream>"
        if line_number is not None:
            location = f"{location}:{line_number}"
        super().__init__(f"{location}: {message}")


class LayoutKeyError(ProplayError, ValueError):
    """A layout accessor was called without a property key."""


class IncludeCycleError(ProplayError):
    """An include directive refers to a source that is already being loaded.

    Attributes:
        name (str): The source that would have been opened again.
        sources (tuple[str, ...]): The stack of open sources, outermost first.
    """

    def __init__(self, name: str, sources: Sequence[str]) -> None:
        self.name = name
        self.sources = tuple(sources)
        chain: str = " -> ".join((*self.sources, name))
        super().__init__(f"Include cycle detected: {chain}")


class IncludeNotFoundError(ProplayError):
    """A mandatory include directive names a source that cannot be opened."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        msg = f"Cannot open included source {name!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
