# topmark:header:start
#
#   project      : PropLay
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PropLay test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
the logging configuration for test runs.

Notes:
    Layout tests build their input with `PropertiesBuilder`, which alternates
    ``#`` and ``!`` comment prefixes so that both comment styles are covered
    without extra effort.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from proplay.config import logging
from proplay.store.delimiters import ListDelimiterHandler
from proplay.store.properties import PropertiesStore

if TYPE_CHECKING:
    from typing import TextIO

    from proplay.layout.loader import IncludeStack

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.fixture`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.fixture`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_proplay_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PropLay's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("PROPLAY_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


TEST_KEY = "myProperty"
TEST_VALUE = "myPropertyValue"
TEST_COMMENT = "A comment for my test property"


class PropertiesBuilder:
    """Assemble properties text line by line.

    Comments added with `add_comment` alternate between ``# `` and ``! ``
    prefixes; ``None`` adds a blank line. Lines end with ``"\\n"``.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._comment_counter = 0

    def add_property(self, key: str, value: str) -> PropertiesBuilder:
        """Add a ``key = value`` line."""
        self._lines.append(f"{key} = {value}")
        return self

    def add_comment(self, comment: str | None) -> PropertiesBuilder:
        """Add a comment line, or a blank line for None."""
        if comment is None:
            self._lines.append("")
        else:
            prefix = "# " if self._comment_counter % 2 == 0 else "! "
            self._comment_counter += 1
            self._lines.append(prefix + comment)
        return self

    def add_line(self, line: str) -> PropertiesBuilder:
        """Add a raw line."""
        self._lines.append(line)
        return self

    def reader(self) -> TextIO:
        """Return the text as a stream."""
        return io.StringIO(str(self), newline="")

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self._lines)


class MemoryIncludeResolver:
    """Include resolver serving named in-memory sources."""

    def __init__(self, sources: dict[str, str]) -> None:
        self.sources = sources
        self.opened: list[str] = []

    def resolve(self, name: str, sources: IncludeStack) -> str:
        """Return ``name`` unchanged."""
        return name

    def open(self, resolved: str) -> TextIO:
        """Return a stream over the named source."""
        if resolved not in self.sources:
            raise FileNotFoundError(resolved)
        self.opened.append(resolved)
        return io.StringIO(self.sources[resolved], newline="")


def make_store(delimiter: str | None = ",", **kwargs: Any) -> PropertiesStore:
    """Return an empty store with a comma list delimiter unless told otherwise."""
    return PropertiesStore(list_delimiter_handler=ListDelimiterHandler(delimiter), **kwargs)


@pytest.fixture
def builder() -> PropertiesBuilder:
    """Return an empty `PropertiesBuilder`."""
    return PropertiesBuilder()


@pytest.fixture
def store() -> PropertiesStore:
    """Return an empty store splitting values on commas."""
    return make_store()
