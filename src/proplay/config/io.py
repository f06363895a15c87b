# topmark:header:start
#
#   project      : PropLay
#   file         : io.py
#   file_relpath : src/proplay/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML reading and writing for PropLay settings.

Parsing and rendering go through `tomlkit`. Parsed documents are unwrapped to
plain dicts; `CheckedTable` then reads typed values from such a dict and
records a warning for every value of the wrong shape instead of raising.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from proplay.config.keys import Toml
from proplay.config.logging import get_logger
from proplay.constants import (
    DEFAULT_ENCODING,
    DEFAULT_INCLUDE_KEY,
    DEFAULT_INCLUDE_OPTIONAL_KEY,
)

if TYPE_CHECKING:
    from pathlib import Path

    from proplay.config.diagnostics import DiagnosticLog
    from proplay.config.logging import ProplayLogger

logger: ProplayLogger = get_logger(__name__)

TomlTable = dict[str, Any]

E = TypeVar("E", bound=Enum)


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a fresh TOML-compatible dict."""
    return {
        Toml.KEY_ENCODING: DEFAULT_ENCODING,
        Toml.KEY_ESCAPE_UNICODE: False,
        Toml.KEY_LIST_DELIMITER: "",
        Toml.KEY_SEPARATOR: "",
        Toml.KEY_FORCE_SINGLE_LINE: False,
        Toml.KEY_LINE_SEPARATOR: "auto",
        Toml.KEY_KEEP_TRAILING_BLANK_LINES: True,
        Toml.KEY_INCLUDE_KEY: DEFAULT_INCLUDE_KEY,
        Toml.KEY_INCLUDE_OPTIONAL_KEY: DEFAULT_INCLUDE_OPTIONAL_KEY,
        Toml.KEY_INCLUDES_ALLOWED: True,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Parse a UTF-8 TOML file into a plain dict.

    Unreadable or malformed files are logged as errors and yield an empty dict,
    so a broken configuration file degrades to the defaults.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Cannot read TOML file %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Malformed TOML in %s: %s", path, e)
        return {}
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def get_dotted_table(table: TomlTable, dotted: str) -> TomlTable | None:
    """Return the nested table at ``dotted`` (for example ``"tool.proplay"``).

    Returns None as soon as one level is missing or not a table.
    """
    current: Any = table
    for part in dotted.split("."):
        current = current.get(part) if isinstance(current, dict) else None
        if not isinstance(current, dict):
            return None
    return current


def to_toml(data: TomlTable) -> str:
    """Render ``data`` as a TOML document.

    TOML has no null; keys whose value is None are left out.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in data.items():
        if value is None:
            logger.debug("Skipping None value of %s", key)
            continue
        doc.add(key, value)
    return doc.as_string()


class CheckedTable:
    """Typed, forgiving access to one TOML table.

    A missing key yields the default. A value of the wrong type yields the
    default too, and the mismatch is logged and added to ``diagnostics``.

    Args:
        table (TomlTable): The table to read from.
        where (str): Location of the table, used in messages.
        diagnostics (DiagnosticLog): Receives one warning per rejected value.
    """

    def __init__(self, table: TomlTable, *, where: str, diagnostics: DiagnosticLog) -> None:
        self.table: TomlTable = table
        self.where: str = where
        self.diagnostics: DiagnosticLog = diagnostics

    def reject(self, key: str, problem: str) -> None:
        """Record that the value of ``key`` was ignored because of ``problem``."""
        message = f"{problem} in {self.where}.{key}"
        logger.warning("%s", message)
        self.diagnostics.add_warning(message)

    def _mismatch(self, key: str, expected: str, value: Any) -> None:
        self.reject(key, f"Expected {expected}, got {type(value).__name__} {value!r},")

    def string(self, key: str, default: str = "") -> str:
        """Return the string at ``key``; other types are not coerced."""
        value: Any = self.table.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            self._mismatch(key, "string", value)
            return default
        return value

    def boolean(self, key: str, default: bool = False) -> bool:
        """Return the boolean at ``key``; integers are not accepted."""
        value: Any = self.table.get(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            self._mismatch(key, "bool", value)
            return default
        return value

    def enum(self, key: str, enum_cls: type[E], default: E) -> E:
        """Return the member of ``enum_cls`` whose value is the string at ``key``."""
        value: Any = self.table.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            self._mismatch(key, "string", value)
            return default
        try:
            return enum_cls(value)
        except ValueError:
            allowed: str = ", ".join(str(m.value) for m in enum_cls)
            self.reject(key, f"Invalid value {value!r} (allowed: {allowed})")
            return default
