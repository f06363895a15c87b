# topmark:header:start
#
#   project      : PropLay
#   file         : test_properties.py
#   file_relpath : tests/store/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Properties store: values, lists, editing round trips and file helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from proplay.store.properties import PropertiesStore
from tests.conftest import make_store, mark_integration

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE = """\
# Application settings
# (generated)

# Database connection
db.url = jdbc:h2:mem
db.user=admin

! Feature switches
features : a,b,c
empty.value =
# trailing note
"""


def test_get_returns_string_list_or_none(store: PropertiesStore) -> None:
    """Single values are strings, several values lists, unknown keys None."""
    store.read_string(SAMPLE)
    assert store.get("db.user") == "admin"
    assert store.get("features") == ["a", "b", "c"]
    assert store.get("empty.value") == ""
    assert store.get("missing") is None
    assert store.get_list("missing") == []


def test_queries(store: PropertiesStore) -> None:
    """Keys keep insertion order; membership and size reflect the content."""
    store.read_string(SAMPLE)
    assert store.keys() == ["db.url", "db.user", "features", "empty.value"]
    assert "db.url" in store
    assert store.contains_key("features")
    assert len(store) == 4
    assert not store.is_empty()
    assert store.items()[0] == ("db.url", ["jdbc:h2:mem"])


def test_round_trip_is_exact(store: PropertiesStore) -> None:
    """Loading and saving without changes reproduces the input."""
    store.read_string(SAMPLE)
    assert store.to_string() == SAMPLE


def test_set_value_keeps_comments(store: PropertiesStore) -> None:
    """Changing a value leaves the surrounding layout untouched."""
    store.read_string(SAMPLE)
    store.set_value("db.user", "root")
    assert store.to_string() == SAMPLE.replace("db.user=admin", "db.user=root")


def test_add_new_key_is_appended(store: PropertiesStore) -> None:
    """A new key is appended after the loaded keys with the default layout."""
    store.read_string("a = 1\n")
    store.add_value("b", "2")
    assert store.to_string() == "a = 1\nb = 2\n"


def test_add_value_to_existing_key_writes_lines(store: PropertiesStore) -> None:
    """Adding to an existing key turns it into one line per value."""
    store.read_string("a = 1\n")
    store.add_value("a", "2")
    assert store.get("a") == ["1", "2"]
    assert store.to_string() == "a = 1\na = 2\n"


def test_add_iterable_value(store: PropertiesStore) -> None:
    """An iterable adds each item, splitting items on the delimiter."""
    store.add_value("k", ["x", "y,z"])
    assert store.get_list("k") == ["x", "y", "z"]


def test_empty_key_survives_save_and_load(store: PropertiesStore) -> None:
    """A property with the empty key can be saved and read back."""
    store.add_value("", "v")
    reloaded: PropertiesStore = make_store()
    reloaded.read_string(store.to_string())
    assert reloaded.keys() == [""]
    assert reloaded.get("") == "v"


def test_clear_value_removes_comment(store: PropertiesStore) -> None:
    """A removed key disappears together with its comment."""
    store.read_string(SAMPLE)
    store.clear_value("db.url")
    out: str = store.to_string()
    assert "db.url" not in out
    assert "# Database connection" not in out
    assert out.startswith("# Application settings\n# (generated)\n\ndb.user=admin\n")


def test_clear_value_of_unknown_key(store: PropertiesStore) -> None:
    """Removing an unknown key changes nothing."""
    store.read_string("a = 1\n")
    store.clear_value("nope")
    assert store.to_string() == "a = 1\n"


def test_clear_then_add(store: PropertiesStore) -> None:
    """After clear the store starts from an empty layout."""
    store.read_string(SAMPLE)
    store.clear()
    assert store.is_empty()
    store.add_value("x", "1")
    assert store.to_string() == "x = 1\n"


def test_delimiter_round_trip(store: PropertiesStore) -> None:
    """Escaped delimiters survive loading and saving."""
    text = "path = a\\,b,c\n"
    store.read_string(text)
    assert store.get("path") == ["a,b", "c"]
    assert store.to_string() == text


def test_values_without_delimiter_are_not_split() -> None:
    """Without list delimiter a comma is an ordinary character."""
    store: PropertiesStore = make_store(None)
    store.read_string("k = a,b\n")
    assert store.get("k") == "a,b"


def test_escape_unicode_on_save() -> None:
    """Non-ASCII characters are escaped on save when configured."""
    store: PropertiesStore = make_store(escape_unicode=True)
    store.add_value("name", "José")
    assert store.to_string() == "name = Jos\\u00e9\n"


def test_repr(store: PropertiesStore) -> None:
    """The representation shows the number of keys."""
    store.add_value("k", "v")
    assert repr(store) == "PropertiesStore(keys=1)"


@mark_integration
def test_load_and_save_file(tmp_path: Path) -> None:
    """Files are read and written with their line breaks intact."""
    path: Path = tmp_path / "app.properties"
    path.write_bytes(b"# header\r\n\r\nkey = value\r\n")

    store: PropertiesStore = make_store()
    store.load_file(path)
    store.set_value("key", "other")
    store.save_file(path)

    assert path.read_bytes() == b"# header\r\n\r\nkey = other\r\n"
