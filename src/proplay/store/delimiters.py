# topmark:header:start
#
#   project      : PropLay
#   file         : delimiters.py
#   file_relpath : src/proplay/store/delimiters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""List delimiter handling for multi-valued properties.

A property such as ``colors = red,green,blue`` holds three values when a list
delimiter (here ``,``) is configured. A delimiter that is part of a value is
escaped with a backslash (``a\\,b``). Without a delimiter every value is a
single string and multiple values can only be written one line per value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from proplay.constants import ESCAPE

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class ListDelimiterHandler:
    """Split and join list values on a single delimiter character.

    Attributes:
        delimiter (str | None): The delimiter character, or None to disable
            list handling.
    """

    delimiter: str | None = None

    def __post_init__(self) -> None:
        if self.delimiter is not None and len(self.delimiter) != 1:
            raise ValueError(f"List delimiter must be a single character, got {self.delimiter!r}")
        if self.delimiter == ESCAPE:
            raise ValueError("The escape character cannot be used as list delimiter")

    @property
    def enabled(self) -> bool:
        """Return True if values are split on a delimiter."""
        return self.delimiter is not None

    @property
    def escaped_chars(self) -> str:
        """Characters whose escapes must survive until `split` runs."""
        if self.delimiter is None:
            return ""
        return ESCAPE + self.delimiter

    def split(self, value: str, trim: bool = True) -> list[str]:
        """Split ``value`` on unescaped delimiters.

        ``\\<delimiter>`` becomes the delimiter and ``\\\\`` a single backslash;
        any other escape is kept verbatim.

        Args:
            value (str): The raw value.
            trim (bool): Strip surrounding whitespace from each part when the
                value is actually split.

        Returns:
            list[str]: The parts, at least one.
        """
        if self.delimiter is None:
            return [value]

        parts: list[str] = []
        token: list[str] = []
        in_escape = False
        for c in value:
            if in_escape:
                if c not in (self.delimiter, ESCAPE):
                    token.append(ESCAPE)
                token.append(c)
                in_escape = False
            elif c == self.delimiter:
                parts.append("".join(token))
                token = []
            elif c == ESCAPE:
                in_escape = True
            else:
                token.append(c)
        if in_escape:
            token.append(ESCAPE)
        parts.append("".join(token))

        if trim and len(parts) > 1:
            parts = [p.strip() for p in parts]
        return parts

    def escape(self, value: str) -> str:
        """Escape delimiter characters inside ``value`` with a backslash."""
        if self.delimiter is None:
            return value
        return value.replace(self.delimiter, ESCAPE + self.delimiter)

    def join(self, values: Sequence[str]) -> str | None:
        """Join escaped values on the delimiter.

        Returns:
            str | None: The joined text, or None if several values cannot be
                put on one line because list handling is disabled.
        """
        if self.delimiter is None:
            return values[0] if len(values) == 1 else None
        return self.delimiter.join(self.escape(v) for v in values)
