# topmark:header:start
#
#   project      : PropLay
#   file         : saver.py
#   file_relpath : src/proplay/layout/saver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write a store back to text following its layout.

Output order:

1. the header comment, comment characters enforced;
2. for each layout key the store still contains: its blank lines, its comment
   and its value line(s). The first key is separated from a header comment by
   one blank line when it has no blank lines of its own;
3. the footer comment.

Keys the store no longer contains are skipped, and so are their comments.
Errors raised by the target stream propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from proplay.config.logging import get_logger
from proplay.layout.writer import PropertiesWriter

if TYPE_CHECKING:
    from typing import TextIO

    from proplay.config.logging import ProplayLogger
    from proplay.layout.model import PropertiesLayout
    from proplay.store.properties import PropertyStore

logger: ProplayLogger = get_logger(__name__)


def save_layout(
    layout: PropertiesLayout,
    store: PropertyStore,
    stream: TextIO,
    *,
    escape_unicode: bool = False,
) -> None:
    """Write ``store`` to ``stream`` using ``layout``.

    Args:
        layout (PropertiesLayout): The layout to follow.
        store (PropertyStore): Source of the current values.
        stream (TextIO): The target stream.
        escape_unicode (bool): Write non-ASCII characters as ``\\uXXXX`` escapes.
    """
    writer = PropertiesWriter(
        stream,
        store.list_delimiter_handler,
        line_separator=layout.line_separator,
        global_separator=layout.global_separator,
        escape_unicode=escape_unicode,
    )

    header: str | None = layout.get_canonical_header_comment(True)
    writer.write_comment(header)

    written = 0
    first_key = True
    for key in layout.get_keys():
        if store.contains_key(key):
            blank_lines = layout.get_blank_lines_before(key)
            if first_key and header is not None and blank_lines == 0:
                writer.writeln()
            for _ in range(blank_lines):
                writer.writeln()
            writer.write_comment(layout.get_canonical_comment(key, True))

            data = layout.get_layout_data(key)
            writer.current_separator = data.separator if data else None
            single_line = layout.force_single_line or layout.is_single_line(key)
            writer.write_property(key, store.get_list(key), single_line)
            written += 1
        else:
            logger.trace("Skipping %r: not in the store", key)
        first_key = False

    writer.write_comment(layout.get_canonical_footer_comment(True))
    writer.finish(final_newline=layout.final_newline)
    logger.debug("Saved %d properties", written)
