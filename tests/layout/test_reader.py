# topmark:header:start
#
#   project      : PropLay
#   file         : test_reader.py
#   file_relpath : tests/layout/test_reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line reader: physical lines, property splitting, escapes and parse errors."""

from __future__ import annotations

import io

import pytest

from proplay.errors import PropertiesParseError
from proplay.layout.reader import (
    PropertiesReader,
    PropertyLine,
    ends_with_continuation,
    split_lines,
    split_property_line,
    unescape,
)
from tests.conftest import parametrize


def read_all(text: str, **kwargs: str) -> tuple[list[PropertyLine], PropertiesReader]:
    """Return all properties of ``text`` and the exhausted reader."""
    reader = PropertiesReader(io.StringIO(text, newline=""), **kwargs)
    return list(reader), reader


def test_split_lines_detects_line_separator() -> None:
    """The first line break found is reported."""
    lines, sep, final = split_lines("a\r\nb\nc\r\n")
    assert lines == ["a", "b", "c"]
    assert sep == "\r\n"
    assert final


def test_split_lines_without_final_newline() -> None:
    """A missing final line break is reported."""
    lines, sep, final = split_lines("a\rb")
    assert lines == ["a", "b"]
    assert sep == "\r"
    assert not final


def test_split_lines_empty_text() -> None:
    """Empty text has no lines and counts as terminated."""
    assert split_lines("") == ([], None, True)


@parametrize(
    "line, expected",
    [
        ("a = b\\", True),
        ("a = b\\\\", False),
        ("a = b\\\\\\", True),
        ("a = b", False),
    ],
)
def test_ends_with_continuation(line: str, expected: bool) -> None:
    """Only an odd number of trailing backslashes continues a line."""
    assert ends_with_continuation(line) is expected


@parametrize(
    "line, expected",
    [
        ("key=value", ("key", "=", "value")),
        ("key = value", ("key", " = ", "value")),
        ("key:value", ("key", ":", "value")),
        ("key value", ("key", " ", "value")),
        ("key", ("key", "", "")),
        ("key =", ("key", " =", "")),
        ("a\\ b = c", ("a\\ b", " = ", "c")),
        ("key = = value", ("key", " = ", "= value")),
    ],
)
def test_split_property_line(line: str, expected: tuple[str, str, str]) -> None:
    """Key, separator and value are split at the first unescaped separator."""
    assert split_property_line(line) == expected


def test_unescape_standard_escapes() -> None:
    """Control escapes, unicode escapes and escaped characters are resolved."""
    assert unescape(r"a\tb\nc") == "a\tb\nc"
    assert unescape(r"\u00e9t\u00e9") == "été"
    assert unescape(r"\=\:\ \#") == "=: #"


def test_unescape_surrogate_pair() -> None:
    """Two ``\\u`` escapes forming a surrogate pair give one character."""
    assert unescape(r"\ud83d\ude00") == "\U0001f600"


def test_unescape_keeps_requested_escapes() -> None:
    """Escapes of characters in ``keep`` survive for the list splitter."""
    assert unescape(r"a\,b\\c", keep="\\,") == r"a\,b\\c"


def test_unescape_malformed_unicode() -> None:
    """A short ``\\u`` escape raises ValueError."""
    with pytest.raises(ValueError):
        unescape(r"\u12")


def test_reader_attaches_comment_lines() -> None:
    """Comment and blank lines are reported with the next property."""
    props, reader = read_all("# c\n\na = 1\nb = 2\n# footer\n")
    assert [p.key for p in props] == ["a", "b"]
    assert props[0].comment_lines == ("# c", "")
    assert props[0].line_number == 3
    assert props[1].comment_lines == ()
    assert reader.comment_lines == ["# footer"]
    assert reader.line_separator == "\n"
    assert reader.final_newline


def test_reader_joins_continuation_lines() -> None:
    """Continuation lines are joined without their leading whitespace."""
    props, _ = read_all("key = first \\\n    second\nnext = 1\n")
    assert props[0].value == "first second"
    assert props[1].key == "next"
    assert props[1].line_number == 3


def test_reader_unescapes_key_and_value() -> None:
    """Keys and values come back unescaped."""
    props, _ = read_all("my\\ key = a\\tb\n")
    assert props[0].key == "my key"
    assert props[0].value == "a\tb"


def test_reader_empty_key() -> None:
    """A line starting with a separator is a property with the empty key."""
    props, _ = read_all("=value\n: other\n")
    assert [(p.key, p.separator, p.value) for p in props] == [
        ("", "=", "value"),
        ("", ": ", "other"),
    ]


def test_reader_error_names_source_and_line() -> None:
    """Parse errors carry the source name and the line number."""
    with pytest.raises(PropertiesParseError) as exc_info:
        read_all("a = 1\nb = \\u12\n", source="demo.properties")
    assert exc_info.value.line_number == 2
    assert exc_info.value.source == "demo.properties"
    assert "demo.properties:2" in str(exc_info.value)


def test_reader_unterminated_continuation_raises() -> None:
    """A continuation marker on the last line is a parse error."""
    with pytest.raises(PropertiesParseError):
        read_all("a = 1\\")


def test_reader_malformed_escape_raises() -> None:
    """A malformed unicode escape is reported with its line number."""
    with pytest.raises(PropertiesParseError) as exc_info:
        read_all("a = \\uZZZZ\n")
    assert exc_info.value.line_number == 1
