# topmark:header:start
#
#   project      : PropLay
#   file         : test_sync.py
#   file_relpath : tests/layout/test_sync.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout synchronizer: how store mutation events update the layout."""

from __future__ import annotations

from proplay.constants import DEFAULT_SEPARATOR
from proplay.layout.model import PropertiesLayout
from proplay.layout.sync import LayoutSynchronizer
from proplay.store.events import MutationEvent, MutationKind
from proplay.store.properties import PropertiesStore
from tests.conftest import TEST_COMMENT, TEST_KEY, TEST_VALUE, PropertiesBuilder


def add_event(before_update: bool = False) -> MutationEvent:
    """Return an add event for the test key."""
    return MutationEvent(MutationKind.ADD_PROPERTY, TEST_KEY, TEST_VALUE, before_update)


def test_event_add() -> None:
    """Adding a new key creates a default single-line entry."""
    layout = PropertiesLayout()
    LayoutSynchronizer(layout)(add_event())

    assert TEST_KEY in layout.get_keys()
    assert layout.get_blank_lines_before(TEST_KEY) == 0
    assert layout.is_single_line(TEST_KEY)
    assert layout.get_separator(TEST_KEY) == DEFAULT_SEPARATOR


def test_event_add_before_update_is_ignored() -> None:
    """Notifications sent before the change do not touch the layout."""
    layout = PropertiesLayout()
    LayoutSynchronizer(layout)(add_event(before_update=True))
    assert TEST_KEY not in layout.get_keys()


def test_event_add_existing(store: PropertiesStore, builder: PropertiesBuilder) -> None:
    """Adding to a loaded key makes it multi-line and keeps its comment."""
    builder.add_comment(TEST_COMMENT)
    builder.add_property(TEST_KEY, TEST_VALUE)
    store.read(builder.reader())

    store.add_value(TEST_KEY, TEST_VALUE)

    assert not store.layout.is_single_line(TEST_KEY)
    assert store.layout.get_canonical_comment(TEST_KEY, False) == TEST_COMMENT


def test_event_add_multiple() -> None:
    """The second add of the same key switches to multi-line output."""
    layout = PropertiesLayout()
    sync = LayoutSynchronizer(layout)
    sync(add_event())
    sync(add_event())
    assert not layout.is_single_line(TEST_KEY)


def test_event_clear(store: PropertiesStore, builder: PropertiesBuilder) -> None:
    """Clearing the store drops all entries and the header comment."""
    builder.add_comment("A header comment")
    builder.add_comment(None)
    builder.add_property(TEST_KEY, TEST_VALUE)
    store.read(builder.reader())
    assert store.layout.header_comment is not None

    store.clear()

    assert store.layout.get_keys() == []
    assert store.layout.header_comment is None


def test_event_delete() -> None:
    """Clearing a key drops its entry."""
    layout = PropertiesLayout()
    sync = LayoutSynchronizer(layout)
    sync(add_event())
    sync(MutationEvent(MutationKind.CLEAR_PROPERTY, TEST_KEY))
    assert TEST_KEY not in layout.get_keys()


def test_event_set_non_existing() -> None:
    """Setting an unknown key creates an entry."""
    layout = PropertiesLayout()
    LayoutSynchronizer(layout)(MutationEvent(MutationKind.SET_PROPERTY, TEST_KEY, TEST_VALUE))
    assert TEST_KEY in layout.get_keys()


def test_event_set_existing_keeps_layout(store: PropertiesStore) -> None:
    """Setting a known key leaves its layout entry as it is."""
    store.read_string("# note\nk = 1\nk = 2\n")
    store.set_value("k", "3")
    assert not store.layout.is_single_line("k")
    assert store.layout.get_comment("k") == "# note"
    assert store.to_string() == "# note\nk = 3\n"


def test_event_without_key_is_ignored() -> None:
    """Keyed events that arrive without key change nothing."""
    layout = PropertiesLayout()
    LayoutSynchronizer(layout)(MutationEvent(MutationKind.ADD_PROPERTY, None, TEST_VALUE))
    assert layout.get_keys() == []


def test_events_during_load_are_ignored() -> None:
    """Events fired while the layout is loading do not create entries."""
    layout = PropertiesLayout()
    sync = LayoutSynchronizer(layout)
    seen: list[str] = []

    def property_loaded(key: str, value: str, sources: tuple[str, ...]) -> bool:
        sync(MutationEvent(MutationKind.ADD_PROPERTY, "side_effect", value))
        seen.append(key)
        return True

    store = PropertiesStore()
    layout.load(
        store,
        PropertiesBuilder().add_property("a", "1").reader(),
        property_loaded=property_loaded,
    )

    assert seen == ["a"]
    assert layout.get_keys() == ["a"]
