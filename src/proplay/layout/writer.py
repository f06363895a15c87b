# topmark:header:start
#
#   project      : PropLay
#   file         : writer.py
#   file_relpath : src/proplay/layout/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Low-level writer for properties text.

`PropertiesWriter` knows how to escape keys and values and how to terminate
lines; it has no notion of layout. The saver decides what to write and in
which order.

Line terminators are emitted lazily: a line is only terminated once the next
line starts, or when `PropertiesWriter.finish` is called with
``final_newline=True``. This lets a file without a trailing line break be
reproduced exactly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from proplay.constants import COMMENT_CHARS, CR, ESCAPE, SEPARATORS, WHITE_SPACE

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from proplay.store.delimiters import ListDelimiterHandler

_CONTROL_ESCAPES: Final[dict[str, str]] = {
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
}


def _escape_unicode_char(c: str) -> str:
    code = ord(c)
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    code -= 0x10000
    return f"\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}"


def escape_key(key: str, *, escape_unicode: bool = False) -> str:
    """Escape a property key so that it reads back unchanged.

    Separators, whitespace and backslashes are escaped everywhere; a comment
    character is escaped at the start of the key only.
    """
    out: list[str] = []
    for i, c in enumerate(key):
        if c in _CONTROL_ESCAPES and c not in WHITE_SPACE:
            out.append(_CONTROL_ESCAPES[c])
        elif c in SEPARATORS or c in WHITE_SPACE or c == ESCAPE:
            out.append(ESCAPE + c)
        elif i == 0 and c in COMMENT_CHARS:
            out.append(ESCAPE + c)
        elif escape_unicode and not " " <= c <= "~":
            out.append(_escape_unicode_char(c))
        else:
            out.append(c)
    return "".join(out)


def escape_value(value: str, *, separator: str = "", escape_unicode: bool = False) -> str:
    """Escape a single property value.

    Backslashes and control characters are always escaped. Leading whitespace
    is escaped because the reader folds it into the separator; a leading
    ``=`` or ``:`` is escaped when ``separator`` does not already contain one.
    """
    out: list[str] = []
    for i, c in enumerate(value):
        if c == ESCAPE:
            out.append(ESCAPE + ESCAPE)
        elif c in _CONTROL_ESCAPES:
            out.append(_CONTROL_ESCAPES[c])
        elif i == 0 and c == " ":
            out.append(ESCAPE + c)
        elif i == 0 and c in SEPARATORS and not any(s in separator for s in SEPARATORS):
            out.append(ESCAPE + c)
        elif escape_unicode and not " " <= c <= "~":
            out.append(_escape_unicode_char(c))
        else:
            out.append(c)
    return "".join(out)


class PropertiesWriter:
    """Write comments and properties to a character stream.

    Args:
        out (TextIO): The target stream.
        delimiter_handler (ListDelimiterHandler): Used to escape and join list values.
        line_separator (str): Terminator for every written line.
        global_separator (str | None): If set, used between every key and value.
        escape_unicode (bool): Escape characters outside printable ASCII as ``\\uXXXX``.

    Attributes:
        current_separator (str | None): Separator for the next property when no
            global separator is set.
    """

    def __init__(
        self,
        out: TextIO,
        delimiter_handler: ListDelimiterHandler,
        *,
        line_separator: str = CR,
        global_separator: str | None = None,
        escape_unicode: bool = False,
    ) -> None:
        self.out = out
        self.delimiter_handler = delimiter_handler
        self.line_separator = line_separator
        self.global_separator = global_separator
        self.escape_unicode = escape_unicode
        self.current_separator: str | None = None
        self._pending_eol = False

    def write(self, text: str) -> None:
        """Write text to the current line."""
        if self._pending_eol:
            self.out.write(self.line_separator)
            self._pending_eol = False
        self.out.write(text)

    def writeln(self, text: str | None = None) -> None:
        """Write a complete line; ``None`` writes a blank line."""
        self.write(text or "")
        self._pending_eol = True

    def write_comment(self, comment: str | None) -> None:
        r"""Write a canonical comment, translating ``"\n"`` to the line separator."""
        if comment is None:
            return
        for line in comment.split(CR):
            self.writeln(line)

    def fetch_separator(self) -> str:
        """Return the separator to use for the next property."""
        if self.global_separator is not None:
            return self.global_separator
        return self.current_separator or ""

    def write_property(self, key: str, values: str | Sequence[str], single_line: bool) -> None:
        """Write a property with one or more values.

        Args:
            key (str): The property key.
            values (str | Sequence[str]): A single value or a list of values.
            single_line (bool): Try to put all values on one line joined with the
                list delimiter; falls back to one line per value if the
                delimiter handler cannot join them.
        """
        if isinstance(values, str):
            values = [values]
        if not values:
            return

        separator = self.fetch_separator()
        escaped = [
            escape_value(v, separator=separator, escape_unicode=self.escape_unicode)
            for v in values
        ]
        if single_line or len(escaped) == 1:
            joined = self.delimiter_handler.join(escaped)
            if joined is not None:
                self._write_line(key, separator, joined)
                return

        for v in escaped:
            self._write_line(key, separator, self.delimiter_handler.escape(v))

    def _write_line(self, key: str, separator: str, value: str) -> None:
        self.writeln(escape_key(key, escape_unicode=self.escape_unicode) + separator + value)

    def finish(self, *, final_newline: bool = True) -> None:
        """Terminate the last line if requested and flush the stream."""
        if self._pending_eol and final_newline:
            self.out.write(self.line_separator)
        self._pending_eol = False
        self.out.flush()
