# topmark:header:start
#
#   project      : PropLay
#   file         : events.py
#   file_relpath : src/proplay/store/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutation events of a properties store and their subscription handles.

Stores keep an explicit list of listeners. Every mutation is reported twice:
once before the store changes (``before_update=True``) and once after.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from proplay.config.logging import get_logger

logger = get_logger(__name__)


class MutationKind(str, Enum):
    """Kinds of store mutations.

    Members:
      ADD_PROPERTY: A value was added to a key (creating the key if needed).
      SET_PROPERTY: The values of a key were replaced (creating the key if needed).
      CLEAR_PROPERTY: A key was removed.
      CLEAR: All keys were removed.
    """

    ADD_PROPERTY = "add_property"
    SET_PROPERTY = "set_property"
    CLEAR_PROPERTY = "clear_property"
    CLEAR = "clear"


@dataclass(frozen=True)
class MutationEvent:
    """A single store mutation.

    Attributes:
        kind (MutationKind): What happened.
        key (str | None): The affected key (None for ``CLEAR``).
        value (object): The value passed to the mutating call, if any.
        before_update (bool): True for the notification sent before the change.
    """

    kind: MutationKind
    key: str | None = None
    value: object = None
    before_update: bool = False


MutationListener = Callable[[MutationEvent], None]


class Subscription:
    """Handle returned by `EventSource.subscribe`; `cancel` removes the listener."""

    def __init__(self, source: EventSource, listener: MutationListener) -> None:
        self._source = source
        self.listener = listener

    @property
    def active(self) -> bool:
        """True while the listener is registered."""
        return self._source.is_subscribed(self.listener)

    def cancel(self) -> None:
        """Unregister the listener; calling it twice is harmless."""
        self._source.unsubscribe(self.listener)


class EventSource:
    """Listener registry with synchronous, in-order delivery."""

    def __init__(self) -> None:
        self._listeners: list[MutationListener] = []

    def subscribe(self, listener: MutationListener) -> Subscription:
        """Register ``listener`` and return its subscription handle."""
        self._listeners.append(listener)
        return Subscription(self, listener)

    def unsubscribe(self, listener: MutationListener) -> None:
        """Remove ``listener`` if it is registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def is_subscribed(self, listener: MutationListener) -> bool:
        """Return True if ``listener`` is registered."""
        return listener in self._listeners

    @property
    def listeners(self) -> tuple[MutationListener, ...]:
        """The registered listeners in delivery order."""
        return tuple(self._listeners)

    def fire(
        self,
        kind: MutationKind,
        key: str | None,
        value: object,
        *,
        before_update: bool,
    ) -> None:
        """Deliver an event to every listener."""
        if not self._listeners:
            return
        event = MutationEvent(kind=kind, key=key, value=value, before_update=before_update)
        logger.trace("Firing %s", event)
        for listener in tuple(self._listeners):
            listener(event)
