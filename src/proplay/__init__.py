# topmark:header:start
#
#   project      : PropLay
#   file         : __init__.py
#   file_relpath : src/proplay/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PropLay package.

PropLay is a format-preserving layout engine for ``.properties``-style files.
Loading a file fills a logical key/value store and a parallel layout model
(comments, blank lines, separators, single-line vs. multi-line values, header
and footer comments); saving walks the layout and reproduces the original text,
including any edits made to the store in between.

Typical use:

    ```python
    from proplay import PropertiesStore

    store = PropertiesStore()
    with open("app.properties", encoding="utf-8", newline="") as fp:
        store.read(fp)
    store.set_value("db.port", "5433")
    with open("app.properties", "w", encoding="utf-8", newline="") as fp:
        store.write(fp)
    ```
"""

from __future__ import annotations

from proplay.errors import (
    IncludeCycleError,
    IncludeNotFoundError,
    LayoutKeyError,
    PropertiesParseError,
    ProplayError,
)
from proplay.layout.model import PropertiesLayout, PropertyLayoutData
from proplay.store.delimiters import ListDelimiterHandler
from proplay.store.events import MutationEvent, MutationKind, Subscription
from proplay.store.properties import PropertiesStore

__all__ = [
    "IncludeCycleError",
    "IncludeNotFoundError",
    "LayoutKeyError",
    "ListDelimiterHandler",
    "MutationEvent",
    "MutationKind",
    "PropertiesLayout",
    "PropertiesParseError",
    "PropertiesStore",
    "PropertyLayoutData",
    "ProplayError",
    "Subscription",
]
