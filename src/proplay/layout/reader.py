# topmark:header:start
#
#   project      : PropLay
#   file         : reader.py
#   file_relpath : src/proplay/layout/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line reader and tokenizer for properties text.

`PropertiesReader` turns a character stream into a sequence of
`PropertyLine` records. Every record carries the comment and blank lines that
were read since the previous property, so the loader can attach them to the
right key; whatever is pending when the stream ends is exposed through
`PropertiesReader.comment_lines` and becomes the footer.

Line classification:

* ``""`` is a blank line;
* a line that is whitespace only or whose first non-blank character is ``#``
  or ``!`` is a comment line (whitespace-only lines are kept verbatim);
* anything else starts a property. A property line ending in an odd number of
  backslashes continues on the next physical line; continuation lines are
  joined before the line is split, so they never start a unit of their own.

Physical lines may end in ``\\n``, ``\\r\\n`` or ``\\r``. The first line break
seen is reported as `PropertiesReader.line_separator` so that saving can
reproduce it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from proplay.config.logging import get_logger
from proplay.constants import ESCAPE, SEPARATORS, WHITE_SPACE
from proplay.errors import PropertiesParseError
from proplay.layout.comments import is_comment_line

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO

    from proplay.config.logging import ProplayLogger

logger: ProplayLogger = get_logger(__name__)

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")

_UNESCAPES: Final[dict[str, str]] = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}


@dataclass(frozen=True)
class PropertyLine:
    """A property read from the stream, with the lines that preceded it.

    Attributes:
        key (str): The unescaped property key.
        value (str): The unescaped property value (list delimiters may still be escaped).
        separator (str): The literal text between key and value.
        comment_lines (tuple[str, ...]): Comment and blank lines read since the
            previous property, verbatim and without line terminators.
        line_number (int): 1-based number of the physical line the property starts on.
    """

    key: str
    value: str
    separator: str
    comment_lines: tuple[str, ...]
    line_number: int


def split_lines(text: str) -> tuple[list[str], str | None, bool]:
    """Split text into physical lines.

    Args:
        text (str): The complete input text.

    Returns:
        tuple[list[str], str | None, bool]: The lines without terminators, the
            first line break found (``None`` if there is none), and whether the
            text ends with a line break (True for empty text).
    """
    lines: list[str] = _LINE_BREAK_RE.split(text)
    match: re.Match[str] | None = _LINE_BREAK_RE.search(text)
    line_separator: str | None = match.group(0) if match else None
    final_newline = True
    if lines[-1] == "":
        lines.pop()
    else:
        final_newline = False
    return lines, line_separator, final_newline


def ends_with_continuation(line: str) -> bool:
    """Return True if ``line`` ends with an unescaped backslash."""
    count = len(line) - len(line.rstrip(ESCAPE))
    return count % 2 == 1


def split_property_line(line: str) -> tuple[str, str, str]:
    """Split a logical property line into key, separator and value.

    The key ends at the first unescaped whitespace, ``=`` or ``:``. The
    separator is the run of whitespace that follows, which may contain one
    ``=`` or ``:``. Everything after it is the value.

    Args:
        line (str): The property line with continuations already joined and
            leading whitespace removed.

    Returns:
        tuple[str, str, str]: ``(raw_key, separator, raw_value)``; key and value
            are still escaped.
    """
    key: list[str] = []
    separator: list[str] = []
    # 0: key, 1: escape in key, 2: whitespace after key, 3: after the separator char
    state = 0
    for pos, c in enumerate(line):
        if state == 0:
            if c == ESCAPE:
                state = 1
            elif c in WHITE_SPACE:
                separator.append(c)
                state = 2
            elif c in SEPARATORS:
                separator.append(c)
                state = 3
            else:
                key.append(c)
        elif state == 1:
            key.append(ESCAPE + c)
            state = 0
        elif state == 2:
            if c in WHITE_SPACE:
                separator.append(c)
            elif c in SEPARATORS:
                separator.append(c)
                state = 3
            else:
                return "".join(key), "".join(separator), line[pos:]
        else:
            if c not in WHITE_SPACE:
                return "".join(key), "".join(separator), line[pos:]
            separator.append(c)

    if state == 1:
        # A lone escape at the very end of the key
        key.append(ESCAPE)
    return "".join(key), "".join(separator), ""


def unescape(text: str, keep: str = "") -> str:
    r"""Resolve backslash escapes in a key or value.

    ``\t``, ``\n``, ``\r``, ``\f`` and ``\uXXXX`` are translated; a backslash in
    front of any other character is dropped. Escapes of characters listed in
    ``keep`` are left untouched so that a later stage (list splitting) can
    interpret them.

    Args:
        text (str): The escaped text.
        keep (str): Characters whose escapes must be preserved.

    Returns:
        str: The unescaped text.

    Raises:
        ValueError: If a ``\u`` escape is not followed by four hex digits.
    """
    if ESCAPE not in text:
        return text

    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != ESCAPE:
            out.append(ch)
            i += 1
            continue
        if i + 1 == n:
            out.append(ch)
            break
        nxt = text[i + 1]
        if nxt in keep:
            out.append(ch + nxt)
            i += 2
        elif nxt == "u":
            digits = text[i + 2 : i + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"Malformed \\uXXXX escape: {text[i : i + 6]!r}")
            out.append(chr(int(digits, 16)))
            i += 6
        else:
            out.append(_UNESCAPES.get(nxt, nxt))
            i += 2

    result = "".join(out)
    if any("\ud800" <= c <= "\udfff" for c in result):
        # Recombine surrogate pairs written as two \u escapes
        result = result.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    return result


class PropertiesReader:
    """Tokenize properties text into `PropertyLine` records.

    Args:
        stream (TextIO): Readable character stream; it is read completely on
            construction. Open files with ``newline=""`` to preserve ``\\r\\n``.
        source (str | None): Name used in error messages.
        keep_escaped (str): Characters whose escapes survive value unescaping
            (the list delimiter and backslash when list splitting is enabled).

    Attributes:
        comment_lines (list[str]): Comment and blank lines read since the last
            property; after iteration ends, the trailing lines of the stream.
        line_separator (str | None): The first line break found in the input.
        final_newline (bool): Whether the input ends with a line break.
    """

    def __init__(
        self,
        stream: TextIO,
        *,
        source: str | None = None,
        keep_escaped: str = "",
    ) -> None:
        self.source = source
        self.keep_escaped = keep_escaped
        self._lines, self.line_separator, self.final_newline = split_lines(stream.read())
        self._pos = 0
        self.comment_lines: list[str] = []

    def next_property(self) -> PropertyLine | None:
        """Read up to and including the next property line.

        Returns:
            PropertyLine | None: The next property, or None at end of stream.

        Raises:
            PropertiesParseError: On a malformed escape or a continuation marker
                on the last line. A line starting with a separator is a property
                with the empty key.
        """
        self.comment_lines = []
        while self._pos < len(self._lines):
            line_number = self._pos + 1
            line = self._lines[self._pos]
            self._pos += 1
            if is_comment_line(line):
                self.comment_lines.append(line)
                continue

            logical = line.lstrip(WHITE_SPACE)
            while ends_with_continuation(logical):
                if self._pos >= len(self._lines):
                    raise PropertiesParseError(
                        "Unterminated line continuation",
                        source=self.source,
                        line_number=self._pos,
                    )
                logical = logical[:-1] + self._lines[self._pos].lstrip(WHITE_SPACE)
                self._pos += 1

            raw_key, separator, raw_value = split_property_line(logical)
            try:
                key = unescape(raw_key)
                value = unescape(raw_value, self.keep_escaped)
            except ValueError as exc:
                raise PropertiesParseError(
                    str(exc), source=self.source, line_number=line_number
                ) from exc

            logger.trace("Read property %r (separator %r) at line %d", key, separator, line_number)
            return PropertyLine(
                key=key,
                value=value,
                separator=separator,
                comment_lines=tuple(self.comment_lines),
                line_number=line_number,
            )
        return None

    def __iter__(self) -> Iterator[PropertyLine]:
        """Iterate over the remaining properties of the stream."""
        while (prop := self.next_property()) is not None:
            yield prop
