# topmark:header:start
#
#   project      : PropLay
#   file         : loader.py
#   file_relpath : src/proplay/layout/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load a properties stream into a store and its layout.

The loader drives `proplay.layout.reader.PropertiesReader` and, for every
property, first hands key and value to a "property loaded" callback (by default
`PropertyStore.property_loaded`). The callback stores the value and returns
True, or it recognizes an include directive, loads the referenced source into
the same layout and store, and returns False; the directive itself then never
shows up in the layout.

Comment and blank lines read before a property are distributed as follows:

1. In the outermost load, while the layout has no entries yet, the lines up to
   the last blank line before the property's own comment form the header
   comment (unless a header comment is already set; the split applies anyway).
2. Blank lines at the start of the remaining block are counted as blank lines
   before the key.
3. The rest, including blank lines between comment and key, is the key's
   comment. A key that is already known gets the block appended to its
   comment and is switched to multi-line output.

Lines left over at the end of the outermost stream become the footer comment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from proplay.config.logging import get_logger
from proplay.constants import CR
from proplay.layout.reader import PropertiesReader

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from proplay.config.logging import ProplayLogger
    from proplay.layout.model import PropertiesLayout
    from proplay.store.properties import PropertyStore

logger: ProplayLogger = get_logger(__name__)

# Names of the sources currently being loaded, outermost first.
IncludeStack = tuple[str, ...]

# (key, value, open sources) -> True to keep the property, False if it was consumed.
PropertyLoadedCallback = Callable[[str, str, IncludeStack], bool]


def extract_comment(lines: Sequence[str]) -> str | None:
    """Join comment lines into one comment string, or None if there are none."""
    if not lines:
        return None
    return CR.join(lines)


def split_header_comment(layout: PropertiesLayout, lines: Sequence[str]) -> int:
    """Move the header part of the first comment block into the layout.

    The trailing non-blank lines belong to the first key, and so do the blank
    lines directly before them; everything in front is the header comment.
    A header comment set by the caller is left alone.

    Args:
        layout (PropertiesLayout): The layout being loaded.
        lines (Sequence[str]): Comment and blank lines before the first property.

    Returns:
        int: Index of the first line that belongs to the first key.
    """
    index = len(lines) - 1
    while index >= 0 and lines[index] != "":
        index -= 1
    while index >= 0 and lines[index] == "":
        index -= 1
    if layout.header_comment is None:
        layout.header_comment = extract_comment(lines[: index + 1])
    return index + 1


def load_layout(
    layout: PropertiesLayout,
    store: PropertyStore,
    stream: TextIO,
    *,
    source: str | None = None,
    sources: IncludeStack = (),
    property_loaded: PropertyLoadedCallback | None = None,
) -> None:
    """Read ``stream`` into ``store`` and ``layout``.

    Use `PropertiesLayout.load`, which also tracks the nesting level; this
    function assumes it is called from there.

    Args:
        layout (PropertiesLayout): The layout to update.
        store (PropertyStore): The logical store receiving the values.
        stream (TextIO): The text to parse.
        source (str | None): Name of the stream for messages; defaults to the
            innermost entry of ``sources``.
        sources (IncludeStack): Sources being loaded, outermost first. Passed to
            the callback for include cycle detection.
        property_loaded (PropertyLoadedCallback | None): Replaces
            ``store.property_loaded``.

    Raises:
        PropertiesParseError: On malformed input; the layout may be partially
            updated.
    """
    callback: PropertyLoadedCallback = property_loaded or store.property_loaded
    name: str | None = source or (sources[-1] if sources else None)
    outermost: bool = layout.load_depth <= 1

    reader = PropertiesReader(
        stream,
        source=name,
        keep_escaped=store.list_delimiter_handler.escaped_chars,
    )
    if not layout.has_line_separator and reader.line_separator is not None:
        layout.line_separator = reader.line_separator
    if outermost:
        layout.final_newline = reader.final_newline

    logger.debug("Loading properties from %s (depth %d)", name or "<stream>", layout.load_depth)
    count = 0
    while (prop := reader.next_property()) is not None:
        if not callback(prop.key, prop.value, sources):
            logger.debug(
                "Property %r at line %d was consumed by the loader callback",
                prop.key,
                prop.line_number,
            )
            continue

        count += 1
        lines = prop.comment_lines
        contained: bool = prop.key in layout

        idx = 0
        if outermost and len(layout) == 0:
            idx = split_header_comment(layout, lines)
        blank_lines = 0
        while idx < len(lines) and lines[idx] == "":
            idx += 1
            blank_lines += 1
        comment: str | None = extract_comment(lines[idx:])

        data = layout.fetch_layout_data(prop.key)
        if contained:
            data.add_comment(comment)
            data.single_line = False
        else:
            data.comment = comment
            data.blank_lines = blank_lines
            data.separator = prop.separator

    trailing: list[str] = reader.comment_lines
    if outermost:
        if not layout.keep_trailing_blank_lines:
            while trailing and trailing[-1] == "":
                trailing.pop()
        layout.footer_comment = extract_comment(trailing)
    elif trailing:
        logger.debug("Dropping %d trailing comment line(s) of included %s", len(trailing), name)

    logger.debug("Loaded %d properties from %s", count, name or "<stream>")
