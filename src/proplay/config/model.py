# topmark:header:start
#
#   project      : PropLay
#   file         : model.py
#   file_relpath : src/proplay/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model for PropLay.

`ProplaySettings` is an immutable snapshot of the options that shape how
properties files are read and written. It is built from defaults, from a TOML
table (``proplay.toml`` or ``[tool.proplay]`` in ``pyproject.toml``) or by
discovery, walking up from a start directory. Invalid values never abort
loading: they are recorded as warnings in `ProplaySettings.diagnostics` and
replaced by their defaults.

Settings build ready-to-use stores with `ProplaySettings.new_store`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from proplay.config.diagnostics import DiagnosticLog, FrozenDiagnosticLog
from proplay.config.io import CheckedTable, get_dotted_table, load_defaults_dict, load_toml_dict
from proplay.config.keys import Toml
from proplay.config.logging import get_logger
from proplay.constants import (
    DEFAULT_ENCODING,
    DEFAULT_INCLUDE_KEY,
    DEFAULT_INCLUDE_OPTIONAL_KEY,
    DEFAULT_TOML_CONFIG_NAME,
    ESCAPE,
    PYPROJECT_SECTION,
    PYPROJECT_TOML_NAME,
)
from proplay.layout.model import PropertiesLayout
from proplay.store.delimiters import ListDelimiterHandler
from proplay.store.includes import FileIncludeResolver
from proplay.store.properties import PropertiesStore

if TYPE_CHECKING:
    from proplay.config.io import TomlTable
    from proplay.config.logging import ProplayLogger
    from proplay.store.includes import Lookup

logger: ProplayLogger = get_logger(__name__)


class LineSeparator(str, Enum):
    """Line terminator used when saving.

    Members:
      AUTO: Reuse the terminator detected while loading (``\\n`` for new files).
      LF: ``\\n``.
      CRLF: ``\\r\\n``.
      CR: ``\\r``.
    """

    AUTO = "auto"
    LF = "lf"
    CRLF = "crlf"
    CR = "cr"

    @property
    def chars(self) -> str | None:
        """The terminator characters, or None for `AUTO`."""
        return {
            LineSeparator.AUTO: None,
            LineSeparator.LF: "\n",
            LineSeparator.CRLF: "\r\n",
            LineSeparator.CR: "\r",
        }[self]


@dataclass(frozen=True)
class ProplaySettings:
    """Immutable PropLay settings.

    Attributes:
        encoding (str): Encoding of properties files.
        list_delimiter (str | None): List delimiter character; None disables
            list splitting.
        separator (str | None): Separator forced between every key and value
            on save; None keeps the separator of each property.
        force_single_line (bool): Write multi-valued properties on one line.
        line_separator (LineSeparator): Line terminator of saved files.
        keep_trailing_blank_lines (bool): Keep blank lines at the end of a file.
        include_key (str | None): Key of mandatory include directives.
        include_optional_key (str | None): Key of optional include directives.
        includes_allowed (bool): Process include directives at all.
        escape_unicode (bool): Write non-ASCII characters as ``\\uXXXX``.
        config_file (Path | None): File the settings were read from.
        diagnostics (FrozenDiagnosticLog): Warnings recorded while reading.
    """

    encoding: str = DEFAULT_ENCODING
    list_delimiter: str | None = None
    separator: str | None = None
    force_single_line: bool = False
    line_separator: LineSeparator = LineSeparator.AUTO
    keep_trailing_blank_lines: bool = True
    include_key: str | None = DEFAULT_INCLUDE_KEY
    include_optional_key: str | None = DEFAULT_INCLUDE_OPTIONAL_KEY
    includes_allowed: bool = True
    escape_unicode: bool = False
    config_file: Path | None = None
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @classmethod
    def from_defaults(cls) -> ProplaySettings:
        """Return the runtime defaults."""
        return cls.from_toml_table(load_defaults_dict(), where="<defaults>")

    @classmethod
    def from_toml_table(
        cls,
        table: TomlTable,
        *,
        where: str = f"[{PYPROJECT_SECTION}]",
        config_file: Path | None = None,
    ) -> ProplaySettings:
        """Build settings from a parsed TOML table.

        Args:
            table (TomlTable): The ``[tool.proplay]`` table or the top level of
                ``proplay.toml``.
            where (str): TOML location used in diagnostics.
            config_file (Path | None): The file the table was read from.

        Returns:
            ProplaySettings: The settings; invalid entries fall back to defaults.
        """
        diagnostics = DiagnosticLog()
        reader = CheckedTable(table, where=where, diagnostics=diagnostics)

        known: set[str] = set(load_defaults_dict())
        for key in table:
            if key not in known:
                reader.reject(key, "Unknown key")

        encoding: str = reader.string(Toml.KEY_ENCODING, DEFAULT_ENCODING)
        if not encoding:
            reader.reject(Toml.KEY_ENCODING, f"Empty encoding, using {DEFAULT_ENCODING},")
            encoding = DEFAULT_ENCODING

        delimiter: str = reader.string(Toml.KEY_LIST_DELIMITER)
        if delimiter and (len(delimiter) != 1 or delimiter == ESCAPE):
            reader.reject(
                Toml.KEY_LIST_DELIMITER,
                f"Expected one character other than a backslash, got {delimiter!r},",
            )
            delimiter = ""

        include_key: str = reader.string(Toml.KEY_INCLUDE_KEY, DEFAULT_INCLUDE_KEY)
        include_optional_key: str = reader.string(
            Toml.KEY_INCLUDE_OPTIONAL_KEY, DEFAULT_INCLUDE_OPTIONAL_KEY
        )

        settings = cls(
            encoding=encoding,
            list_delimiter=delimiter or None,
            separator=reader.string(Toml.KEY_SEPARATOR) or None,
            force_single_line=reader.boolean(Toml.KEY_FORCE_SINGLE_LINE),
            line_separator=reader.enum(
                Toml.KEY_LINE_SEPARATOR, LineSeparator, LineSeparator.AUTO
            ),
            keep_trailing_blank_lines=reader.boolean(
                Toml.KEY_KEEP_TRAILING_BLANK_LINES, default=True
            ),
            include_key=include_key or None,
            include_optional_key=include_optional_key or None,
            includes_allowed=reader.boolean(Toml.KEY_INCLUDES_ALLOWED, default=True),
            escape_unicode=reader.boolean(Toml.KEY_ESCAPE_UNICODE),
            config_file=config_file,
            diagnostics=diagnostics.freeze(),
        )
        logger.trace("Settings from %s: %s", where, settings)
        return settings

    @classmethod
    def from_toml_file(cls, path: Path) -> ProplaySettings | None:
        """Load settings from ``proplay.toml`` or the ``[tool.proplay]`` table of a pyproject.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            ProplaySettings | None: The settings, or None if a ``pyproject.toml``
                has no ``[tool.proplay]`` table.
        """
        logger.debug("Reading settings from %s", path)
        data: TomlTable = load_toml_dict(path)
        where = str(path)
        if path.name == PYPROJECT_TOML_NAME:
            section: TomlTable | None = get_dotted_table(data, PYPROJECT_SECTION)
            if section is None:
                logger.debug("No [%s] table in %s", PYPROJECT_SECTION, path)
                return None
            data = section
            where = f"{path}:[{PYPROJECT_SECTION}]"
        return cls.from_toml_table(data, where=where, config_file=path)

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the nearest configuration file at or above ``start``.

        In each directory ``proplay.toml`` wins over a ``pyproject.toml`` with a
        ``[tool.proplay]`` table.

        Args:
            start (Path): File or directory where discovery starts.

        Returns:
            Path | None: The configuration file, or None if there is none.
        """
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent
        while True:
            candidate: Path = cur / DEFAULT_TOML_CONFIG_NAME
            if candidate.is_file():
                logger.debug("Discovered config file: %s", candidate)
                return candidate
            candidate = cur / PYPROJECT_TOML_NAME
            if candidate.is_file() and get_dotted_table(
                load_toml_dict(candidate), PYPROJECT_SECTION
            ):
                logger.debug("Discovered config file: %s", candidate)
                return candidate
            if cur.parent == cur:
                return None
            cur = cur.parent

    @classmethod
    def discover(cls, start: Path | None = None) -> ProplaySettings:
        """Return the settings of the nearest configuration file, or the defaults.

        Args:
            start (Path | None): Where discovery starts; the current directory by default.
        """
        path: Path | None = cls.discover_config_file(start or Path.cwd())
        if path is not None:
            settings: ProplaySettings | None = cls.from_toml_file(path)
            if settings is not None:
                return settings
        return cls.from_defaults()

    def new_layout(self) -> PropertiesLayout:
        """Return an empty layout configured by these settings."""
        layout = PropertiesLayout()
        layout.global_separator = self.separator
        layout.force_single_line = self.force_single_line
        layout.keep_trailing_blank_lines = self.keep_trailing_blank_lines
        if self.line_separator.chars is not None:
            layout.line_separator = self.line_separator.chars
        return layout

    def new_store(
        self,
        *,
        lookup: Lookup | None = None,
        base_dir: Path | None = None,
    ) -> PropertiesStore:
        """Return an empty store configured by these settings.

        Args:
            lookup (Lookup | None): Expands ``${name}`` references in include names.
            base_dir (Path | None): Directory for includes of streams without a file name.
        """
        return PropertiesStore(
            list_delimiter_handler=ListDelimiterHandler(self.list_delimiter),
            include_key=self.include_key,
            include_optional_key=self.include_optional_key,
            includes_allowed=self.includes_allowed,
            include_resolver=FileIncludeResolver(base_dir=base_dir, encoding=self.encoding),
            lookup=lookup,
            encoding=self.encoding,
            escape_unicode=self.escape_unicode,
            layout=self.new_layout(),
        )
