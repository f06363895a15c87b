# topmark:header:start
#
#   project      : PropLay
#   file         : sync.py
#   file_relpath : src/proplay/layout/sync.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keep a layout in step with mutations of its store.

`LayoutSynchronizer` is an ordinary mutation listener. Register it with
``store.subscribe(LayoutSynchronizer(layout))``; it only reads events and only
writes to the layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from proplay.config.logging import get_logger
from proplay.store.events import MutationKind

if TYPE_CHECKING:
    from proplay.config.logging import ProplayLogger
    from proplay.layout.model import PropertiesLayout
    from proplay.store.events import MutationEvent

logger: ProplayLogger = get_logger(__name__)


class LayoutSynchronizer:
    """Mutation listener updating a `PropertiesLayout`.

    * add: a new key gets a default entry at the end; a known key switches to
      multi-line output, since it now occurs more than once;
    * set: a new key gets a default entry; a known key is left as is;
    * clear key: the entry is dropped;
    * clear: all entries, the header and the footer comment are dropped.

    Notifications sent before a change and events arriving while the layout is
    loading are ignored.
    """

    def __init__(self, layout: PropertiesLayout) -> None:
        self.layout = layout

    def __call__(self, event: MutationEvent) -> None:
        if event.before_update or self.layout.is_loading:
            return

        layout = self.layout
        if event.kind is MutationKind.CLEAR:
            logger.trace("Clearing layout")
            layout.clear()
            return

        key = event.key
        if key is None:
            logger.debug("Ignoring %s event without key", event.kind.value)
            return

        if event.kind is MutationKind.ADD_PROPERTY:
            contained = key in layout
            layout.fetch_layout_data(key).single_line = not contained
        elif event.kind is MutationKind.SET_PROPERTY:
            layout.fetch_layout_data(key)
        elif event.kind is MutationKind.CLEAR_PROPERTY:
            layout.remove(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.layout!r})"
