# topmark:header:start
#
#   project      : PropLay
#   file         : model.py
#   file_relpath : src/proplay/layout/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout model of a properties file.

`PropertiesLayout` shadows a logical properties store: it keeps, per key, the
comment that precedes the key, the number of blank lines before it, the
separator between key and value and whether the values are written on a single
line. It also stores the header and footer comments of the file and a few
global output switches. It never stores values; those live in the store.

The layout is populated by `PropertiesLayout.load` (parsing a stream) and kept
up to date afterwards by a `proplay.layout.sync.LayoutSynchronizer` registered on
the store. `PropertiesLayout.save` writes the store back using the layout.

Accessors follow two rules:

* getters never create entries; for an unknown key they return the defaults
  of a fresh entry;
* setters create the entry on demand. An entry for a key the store does not
  contain is simply skipped on save.

Passing ``None`` as key raises `proplay.errors.LayoutKeyError`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING

from proplay.config.logging import get_logger
from proplay.constants import CR, DEFAULT_SEPARATOR
from proplay.errors import LayoutKeyError
from proplay.layout.comments import canonical_comment, merge_comments
from proplay.layout.loader import load_layout
from proplay.layout.saver import save_layout
from proplay.layout.sync import LayoutSynchronizer

if TYPE_CHECKING:
    from typing import TextIO

    from proplay.config.logging import ProplayLogger
    from proplay.layout.loader import IncludeStack, PropertyLoadedCallback
    from proplay.store.properties import PropertyStore

logger: ProplayLogger = get_logger(__name__)


@dataclass
class PropertyLayoutData:
    """Layout information of a single property key.

    Attributes:
        comment (str | None): Raw comment text (lines joined with ``"\\n"``).
        blank_lines (int): Number of blank lines before the comment.
        separator (str): Text written between key and value.
        single_line (bool): Write all values on one line.
    """

    comment: str | None = None
    blank_lines: int = 0
    separator: str = DEFAULT_SEPARATOR
    single_line: bool = True

    def add_comment(self, comment: str | None) -> None:
        """Append a further comment block to this entry."""
        self.comment = merge_comments(self.comment, comment)


def _check_key(key: str | None) -> str:
    if key is None:
        raise LayoutKeyError("Property key must not be None")
    return key


class PropertiesLayout:
    """Presentation metadata of a properties file.

    Args:
        source (PropertiesLayout | None): If given, the new layout starts as a deep,
            independent copy of ``source``.
    """

    def __init__(self, source: PropertiesLayout | None = None) -> None:
        self._entries: dict[str, PropertyLayoutData] = {}
        self._header_comment: str | None = None
        self._footer_comment: str | None = None
        self._global_separator: str | None = None
        self._line_separator: str | None = None
        self._force_single_line = False
        self.final_newline = True
        self.keep_trailing_blank_lines = True
        self._load_depth = 0
        if source is not None:
            self._copy_from(source)

    def _copy_from(self, source: PropertiesLayout) -> None:
        self._entries = {key: copy.copy(data) for key, data in source._entries.items()}
        self._header_comment = source._header_comment
        self._footer_comment = source._footer_comment
        self._global_separator = source._global_separator
        self._line_separator = source._line_separator
        self._force_single_line = source._force_single_line
        self.final_newline = source.final_newline
        self.keep_trailing_blank_lines = source.keep_trailing_blank_lines

    def copy(self) -> PropertiesLayout:
        """Return an independent copy of this layout."""
        return PropertiesLayout(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={list(self._entries)!r})"

    # --- entries ---

    def get_keys(self) -> list[str]:
        """Return the keys known to the layout, in save order."""
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_layout_data(self, key: str) -> PropertyLayoutData | None:
        """Return the entry of ``key`` or None if the key is unknown."""
        return self._entries.get(_check_key(key))

    def fetch_layout_data(self, key: str) -> PropertyLayoutData:
        """Return the entry of ``key``, creating a default entry if needed."""
        key = _check_key(key)
        data = self._entries.get(key)
        if data is None:
            data = PropertyLayoutData()
            self._entries[key] = data
        return data

    def remove(self, key: str) -> None:
        """Drop the entry of ``key`` (no-op for unknown keys)."""
        self._entries.pop(_check_key(key), None)

    def clear(self) -> None:
        """Drop all entries together with header and footer comment."""
        self._entries.clear()
        self._header_comment = None
        self._footer_comment = None

    @property
    def is_loading(self) -> bool:
        """True while `load` is running (including nested loads)."""
        return self._load_depth > 0

    @property
    def load_depth(self) -> int:
        """Nesting level of the running load; 0 when idle, 1 for the outermost load."""
        return self._load_depth

    # --- per key settings ---

    def get_comment(self, key: str) -> str | None:
        """Return the raw comment of ``key``."""
        data = self.get_layout_data(key)
        return data.comment if data else None

    def set_comment(self, key: str, comment: str | None) -> None:
        """Set (or with None, remove) the comment of ``key``."""
        self.fetch_layout_data(key).comment = comment

    def get_canonical_comment(self, key: str, enforce_comment_char: bool) -> str | None:
        """Return the comment of ``key`` with comment characters removed or enforced."""
        return canonical_comment(self.get_comment(key), enforce_comment_char)

    def get_blank_lines_before(self, key: str) -> int:
        """Return the number of blank lines before ``key``."""
        data = self.get_layout_data(key)
        return data.blank_lines if data else 0

    def set_blank_lines_before(self, key: str, number: int) -> None:
        """Set the number of blank lines before ``key``."""
        if number < 0:
            raise ValueError(f"Number of blank lines must not be negative: {number}")
        self.fetch_layout_data(key).blank_lines = number

    def is_single_line(self, key: str) -> bool:
        """Return True if the values of ``key`` are written on one line."""
        data = self.get_layout_data(key)
        return data.single_line if data else True

    def set_single_line(self, key: str, flag: bool) -> None:
        """Set whether the values of ``key`` are written on one line."""
        self.fetch_layout_data(key).single_line = flag

    def get_separator(self, key: str) -> str:
        """Return the separator of ``key``; the global separator wins if set."""
        if self._global_separator is not None:
            return self._global_separator
        data = self.get_layout_data(key)
        return data.separator if data else DEFAULT_SEPARATOR

    def set_separator(self, key: str, separator: str) -> None:
        """Set the separator written between ``key`` and its value."""
        self.fetch_layout_data(key).separator = separator

    # --- file level settings ---

    @property
    def header_comment(self) -> str | None:
        """Raw comment at the top of the file."""
        return self._header_comment

    @header_comment.setter
    def header_comment(self, comment: str | None) -> None:
        self._header_comment = comment

    def get_canonical_header_comment(self, enforce_comment_char: bool) -> str | None:
        """Return the header comment with comment characters removed or enforced."""
        return canonical_comment(self._header_comment, enforce_comment_char)

    @property
    def footer_comment(self) -> str | None:
        """Raw comment (and blank lines) after the last property."""
        return self._footer_comment

    @footer_comment.setter
    def footer_comment(self, comment: str | None) -> None:
        self._footer_comment = comment

    def get_canonical_footer_comment(self, enforce_comment_char: bool) -> str | None:
        """Return the footer comment with comment characters removed or enforced."""
        return canonical_comment(self._footer_comment, enforce_comment_char)

    @property
    def global_separator(self) -> str | None:
        """Separator overriding every per-key separator, or None."""
        return self._global_separator

    @global_separator.setter
    def global_separator(self, separator: str | None) -> None:
        self._global_separator = separator

    @property
    def line_separator(self) -> str:
        """Terminator of written lines; also replaces line breaks inside comments."""
        return self._line_separator or CR

    @line_separator.setter
    def line_separator(self, separator: str | None) -> None:
        self._line_separator = separator

    @property
    def has_line_separator(self) -> bool:
        """True if a line separator was set explicitly or detected by a load."""
        return self._line_separator is not None

    @property
    def force_single_line(self) -> bool:
        """Write every property on a single line regardless of its entry."""
        return self._force_single_line

    @force_single_line.setter
    def force_single_line(self, flag: bool) -> None:
        self._force_single_line = flag

    # --- load / save ---

    def load(
        self,
        store: PropertyStore,
        stream: TextIO,
        *,
        source: str | None = None,
        sources: IncludeStack = (),
        property_loaded: PropertyLoadedCallback | None = None,
    ) -> None:
        """Read properties from ``stream`` into ``store`` and this layout.

        See `proplay.layout.loader.load_layout` for the details.
        """
        self._load_depth += 1
        try:
            load_layout(
                self,
                store,
                stream,
                source=source,
                sources=sources,
                property_loaded=property_loaded,
            )
        finally:
            self._load_depth -= 1

    def save(self, store: PropertyStore, stream: TextIO, *, escape_unicode: bool = False) -> None:
        """Write ``store`` to ``stream`` following this layout.

        See `proplay.layout.saver.save_layout` for the details.
        """
        save_layout(self, store, stream, escape_unicode=escape_unicode)

    def synchronizer(self) -> LayoutSynchronizer:
        """Return a mutation listener that keeps this layout in sync with a store."""
        return LayoutSynchronizer(self)
