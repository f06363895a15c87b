# topmark:header:start
#
#   project      : PropLay
#   file         : cli_types.py
#   file_relpath : src/proplay/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types and choice enums of the PropLay CLI."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """How `dump` and `version` print their result.

    Members:
      TEXT: Plain text for people.
      JSON: One JSON document.
      TOML: One TOML document rendered with `tomlkit`.
    """

    TEXT = "text"
    JSON = "json"
    TOML = "toml"


class EnumChoiceParam(click.Choice, Generic[E]):
    """A case-insensitive `click.Choice` over the values of an Enum.

    The command receives the Enum member rather than the string.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)
        self.enum_cls: type[E] = enum_cls
        self.name = enum_cls.__name__.lower()

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> E:
        """Return the Enum member named by ``value``."""
        if isinstance(value, self.enum_cls):
            return value
        chosen: str = super().convert(value, param, ctx)
        return self.enum_cls(chosen)
