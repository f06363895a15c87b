# topmark:header:start
#
#   project      : PropLay
#   file         : test_events.py
#   file_relpath : tests/store/test_events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutation events: delivery order, before/after pairs and subscriptions."""

from __future__ import annotations

from proplay.store.events import EventSource, MutationEvent, MutationKind
from proplay.store.properties import PropertiesStore


def test_fire_delivers_in_subscription_order() -> None:
    """Listeners are called synchronously in the order they subscribed."""
    source = EventSource()
    calls: list[str] = []
    source.subscribe(lambda e: calls.append("first"))
    source.subscribe(lambda e: calls.append("second"))

    source.fire(MutationKind.CLEAR, None, None, before_update=False)

    assert calls == ["first", "second"]


def test_subscription_cancel() -> None:
    """A cancelled subscription receives nothing; cancelling twice is harmless."""
    source = EventSource()
    events: list[MutationEvent] = []
    subscription = source.subscribe(events.append)
    assert subscription.active

    subscription.cancel()
    subscription.cancel()
    source.fire(MutationKind.CLEAR, None, None, before_update=False)

    assert not subscription.active
    assert events == []


def test_store_mutations_fire_before_and_after(store: PropertiesStore) -> None:
    """Each mutation is reported before and after the change."""
    events: list[MutationEvent] = []
    store.subscribe(events.append)

    store.add_value("k", "v")
    store.set_value("k", "w")
    store.clear_value("k")
    store.clear()

    assert [(e.kind, e.before_update) for e in events] == [
        (MutationKind.ADD_PROPERTY, True),
        (MutationKind.ADD_PROPERTY, False),
        (MutationKind.SET_PROPERTY, True),
        (MutationKind.SET_PROPERTY, False),
        (MutationKind.CLEAR_PROPERTY, True),
        (MutationKind.CLEAR_PROPERTY, False),
        (MutationKind.CLEAR, True),
        (MutationKind.CLEAR, False),
    ]
    assert events[0].key == "k"
    assert events[0].value == "v"
    assert events[-1].key is None


def test_loading_fires_no_events(store: PropertiesStore) -> None:
    """Values read from a stream are added silently."""
    events: list[MutationEvent] = []
    store.subscribe(events.append)
    store.read_string("a = 1\nb = 2\n")
    assert events == []
    assert store.keys() == ["a", "b"]


def test_replacing_layout_moves_synchronizer(store: PropertiesStore) -> None:
    """After `set_layout` only the new layout follows the store."""
    old = store.layout
    store.set_layout(None)
    store.add_value("k", "v")
    assert "k" not in old.get_keys()
    assert store.layout.get_keys() == ["k"]
