# topmark:header:start
#
#   project      : PropLay
#   file         : properties.py
#   file_relpath : src/proplay/store/properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory logical store of properties.

`PropertiesStore` maps keys to one or more string values, in insertion order.
It owns a `proplay.layout.model.PropertiesLayout` and keeps it current through
a registered `proplay.layout.sync.LayoutSynchronizer`, so reading a file,
editing values and writing it back preserves comments, blank lines and
separators:

    store = PropertiesStore(list_delimiter_handler=ListDelimiterHandler(","))
    store.load_file("app.properties")
    store.set_value("db.url", "jdbc:h2:mem")
    store.save_file("app.properties")

Values read from a stream are added without firing mutation events. Include
directives (``include = other.properties``) are resolved while loading and
load the named sources into the same store and layout.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Protocol

from proplay.config.logging import get_logger
from proplay.constants import (
    DEFAULT_ENCODING,
    DEFAULT_INCLUDE_KEY,
    DEFAULT_INCLUDE_OPTIONAL_KEY,
)
from proplay.errors import IncludeCycleError, IncludeNotFoundError
from proplay.layout.model import PropertiesLayout
from proplay.store.delimiters import ListDelimiterHandler
from proplay.store.events import EventSource, MutationKind
from proplay.store.includes import FileIncludeResolver, expand_variables

if TYPE_CHECKING:
    from typing import TextIO

    from proplay.config.logging import ProplayLogger
    from proplay.layout.loader import IncludeStack
    from proplay.store.events import MutationListener, Subscription
    from proplay.store.includes import IncludeResolver, Lookup

logger: ProplayLogger = get_logger(__name__)

PropertyValue = str | Iterable[str]


class PropertyStore(Protocol):
    """What the layout needs from a logical store."""

    @property
    def list_delimiter_handler(self) -> ListDelimiterHandler:
        """Splits and joins list values."""
        ...

    def get(self, key: str) -> str | list[str] | None:
        """Return the value of ``key``: a string, a list for several values, or None."""
        ...

    def get_list(self, key: str) -> list[str]:
        """Return all values of ``key`` (empty if unknown)."""
        ...

    def contains_key(self, key: str) -> bool:
        """Return True if ``key`` has a value."""
        ...

    def add_value(self, key: str, value: PropertyValue) -> None:
        """Append ``value`` to the values of ``key``."""
        ...

    def set_value(self, key: str, value: PropertyValue) -> None:
        """Replace the values of ``key``."""
        ...

    def clear_value(self, key: str) -> None:
        """Remove ``key``."""
        ...

    def clear(self) -> None:
        """Remove all keys."""
        ...

    def subscribe(self, listener: MutationListener) -> Subscription:
        """Register a mutation listener."""
        ...

    def property_loaded(self, key: str, value: str, sources: IncludeStack) -> bool:
        """Handle a property read by the loader; False if it was consumed."""
        ...


class PropertiesStore:
    """Ordered multi-valued properties with layout tracking.

    Args:
        list_delimiter_handler (ListDelimiterHandler | None): List splitting;
            disabled by default.
        include_key (str | None): Key of mandatory include directives; None
            disables them.
        include_optional_key (str | None): Key of optional include directives;
            None disables them.
        includes_allowed (bool): If False, include directives are dropped
            without loading anything.
        include_resolver (IncludeResolver | None): Locates included sources;
            defaults to a `FileIncludeResolver` using ``encoding``.
        lookup (Lookup | None): Expands ``${name}`` references in include names.
        encoding (str): Encoding of files read and written by the file helpers.
        escape_unicode (bool): Write non-ASCII characters as ``\\uXXXX``.
        layout (PropertiesLayout | None): Layout to use; a new one by default.
    """

    def __init__(
        self,
        *,
        list_delimiter_handler: ListDelimiterHandler | None = None,
        include_key: str | None = DEFAULT_INCLUDE_KEY,
        include_optional_key: str | None = DEFAULT_INCLUDE_OPTIONAL_KEY,
        includes_allowed: bool = True,
        include_resolver: IncludeResolver | None = None,
        lookup: Lookup | None = None,
        encoding: str = DEFAULT_ENCODING,
        escape_unicode: bool = False,
        layout: PropertiesLayout | None = None,
    ) -> None:
        self._values: dict[str, list[str]] = {}
        self._events = EventSource()
        self._list_delimiter_handler: ListDelimiterHandler = (
            list_delimiter_handler or ListDelimiterHandler()
        )
        self.include_key = include_key
        self.include_optional_key = include_optional_key
        self.includes_allowed = includes_allowed
        self.include_resolver: IncludeResolver = include_resolver or FileIncludeResolver(
            encoding=encoding
        )
        self.lookup = lookup
        self.encoding = encoding
        self.escape_unicode = escape_unicode
        self._layout_subscription: Subscription | None = None
        self._layout: PropertiesLayout = PropertiesLayout()
        self.set_layout(layout)

    # --- layout ---

    @property
    def layout(self) -> PropertiesLayout:
        """The layout kept in sync with this store."""
        return self._layout

    def set_layout(self, layout: PropertiesLayout | None) -> None:
        """Replace the layout; None installs a fresh one.

        The synchronizer of the previous layout is unsubscribed.
        """
        if self._layout_subscription is not None:
            self._layout_subscription.cancel()
        self._layout = layout if layout is not None else PropertiesLayout()
        self._layout_subscription = self.subscribe(self._layout.synchronizer())

    @property
    def list_delimiter_handler(self) -> ListDelimiterHandler:
        """Splits values on load and joins them on save."""
        return self._list_delimiter_handler

    # --- queries ---

    def get(self, key: str) -> str | list[str] | None:
        """Return the value of ``key``: a string, a list for several values, or None."""
        values = self._values.get(key)
        if values is None:
            return None
        return values[0] if len(values) == 1 else list(values)

    def get_list(self, key: str) -> list[str]:
        """Return all values of ``key`` (empty if unknown)."""
        return list(self._values.get(key, ()))

    def contains_key(self, key: str) -> bool:
        """Return True if ``key`` has a value."""
        return key in self._values

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return list(self._values)

    def items(self) -> list[tuple[str, list[str]]]:
        """Return ``(key, values)`` pairs in insertion order."""
        return [(key, list(values)) for key, values in self._values.items()]

    def __len__(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        """Return True if the store holds no keys."""
        return not self._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={len(self._values)})"

    # --- mutations ---

    def subscribe(self, listener: MutationListener) -> Subscription:
        """Register ``listener`` for mutation events.

        Args:
            listener (MutationListener): Called twice per mutation, before and
                after the change.

        Returns:
            Subscription: Handle to cancel the registration.
        """
        return self._events.subscribe(listener)

    def _split(self, value: PropertyValue) -> list[str]:
        if isinstance(value, str):
            return self._list_delimiter_handler.split(value)
        parts: list[str] = []
        for item in value:
            parts.extend(self._list_delimiter_handler.split(item))
        return parts

    def _add_silently(self, key: str, value: PropertyValue) -> None:
        values: list[str] = self._split(value)
        if not values:
            return
        self._values.setdefault(key, []).extend(values)

    def add_value(self, key: str, value: PropertyValue) -> None:
        """Append ``value`` to the values of ``key``, creating the key if needed.

        A string is split on the list delimiter; an iterable adds each item.
        """
        self._events.fire(MutationKind.ADD_PROPERTY, key, value, before_update=True)
        self._add_silently(key, value)
        self._events.fire(MutationKind.ADD_PROPERTY, key, value, before_update=False)

    def set_value(self, key: str, value: PropertyValue) -> None:
        """Replace the values of ``key``, creating the key if needed."""
        self._events.fire(MutationKind.SET_PROPERTY, key, value, before_update=True)
        self._values.pop(key, None)
        self._add_silently(key, value)
        self._events.fire(MutationKind.SET_PROPERTY, key, value, before_update=False)

    def clear_value(self, key: str) -> None:
        """Remove ``key`` and its values."""
        self._events.fire(MutationKind.CLEAR_PROPERTY, key, None, before_update=True)
        self._values.pop(key, None)
        self._events.fire(MutationKind.CLEAR_PROPERTY, key, None, before_update=False)

    def clear(self) -> None:
        """Remove all keys."""
        self._events.fire(MutationKind.CLEAR, None, None, before_update=True)
        self._values.clear()
        self._events.fire(MutationKind.CLEAR, None, None, before_update=False)

    # --- loading ---

    def _matches(self, key: str, directive: str | None) -> bool:
        return bool(directive) and key.casefold() == directive.casefold()

    def property_loaded(self, key: str, value: str, sources: IncludeStack) -> bool:
        """Store a property read by the loader, or process an include directive.

        Args:
            key (str): The property key.
            value (str): The property value as read (delimiters still escaped).
            sources (IncludeStack): Sources currently being loaded.

        Returns:
            bool: True if the property was stored, False for include directives.

        Raises:
            IncludeCycleError: If an include names a source already being loaded.
            IncludeNotFoundError: If a mandatory include cannot be opened.
        """
        optional: bool
        if self._matches(key, self.include_key):
            optional = False
        elif self._matches(key, self.include_optional_key):
            optional = True
        else:
            self._add_silently(key, value)
            return True

        if not self.includes_allowed:
            logger.debug("Includes disabled, dropping %s = %s", key, value)
            return False
        for name in self._list_delimiter_handler.split(value):
            self._load_include(name, optional=optional, sources=sources)
        return False

    def _load_include(self, name: str, *, optional: bool, sources: IncludeStack) -> None:
        target: str = expand_variables(name, self.lookup)
        resolved: str = self.include_resolver.resolve(target, sources)
        if resolved in sources:
            raise IncludeCycleError(resolved, sources)
        try:
            stream: TextIO = self.include_resolver.open(resolved)
        except OSError as exc:
            if optional:
                logger.warning("Skipping optional include %s: %s", target, exc)
                return
            raise IncludeNotFoundError(target, str(exc)) from exc

        logger.debug("Including %s (depth %d)", resolved, len(sources) + 1)
        with stream:
            self._layout.load(self, stream, source=resolved, sources=(*sources, resolved))

    def read(self, stream: TextIO, source: str | None = None) -> None:
        """Load properties from ``stream`` into this store and its layout.

        Args:
            stream (TextIO): The text to read.
            source (str | None): Name of the stream; the base for relative
                includes when it is a file path.

        Raises:
            PropertiesParseError: On malformed input.
            IncludeCycleError: On recursive includes.
            IncludeNotFoundError: If a mandatory include cannot be opened.
        """
        sources: IncludeStack = (source,) if source else ()
        self._layout.load(self, stream, source=source, sources=sources)

    def read_string(self, text: str, source: str | None = None) -> None:
        """Load properties from a string."""
        self.read(io.StringIO(text, newline=""), source)

    def load_file(self, path: str | Path) -> None:
        """Load properties from a file, using ``self.encoding``."""
        resolved: Path = Path(path).resolve()
        logger.info("Reading %s", resolved)
        with resolved.open(encoding=self.encoding, newline="") as fp:
            self.read(fp, str(resolved))

    # --- saving ---

    def write(self, stream: TextIO) -> None:
        """Write all properties to ``stream`` following the layout."""
        self._layout.save(self, stream, escape_unicode=self.escape_unicode)

    def to_string(self) -> str:
        """Return the text `write` would produce."""
        out = io.StringIO(newline="")
        self.write(out)
        return out.getvalue()

    def save_file(self, path: str | Path) -> None:
        """Write all properties to a file, using ``self.encoding``."""
        logger.info("Writing %s", path)
        with Path(path).open("w", encoding=self.encoding, newline="") as fp:
            self.write(fp)
