# topmark:header:start
#
#   project      : PropLay
#   file         : diagnostics.py
#   file_relpath : src/proplay/config/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Problems found while reading settings.

Settings never fail to load because of a bad value. Each problem is recorded
as a `Diagnostic` instead and the value falls back to its default; the CLI
prints the recorded diagnostics before running a command.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class DiagnosticLevel(Enum):
    """Severity of a settings diagnostic.

    Rejected values are warnings; INFO is for remarks that need no action.
    """

    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """One settings problem."""

    level: DiagnosticLevel
    message: str

    def __str__(self) -> str:
        return f"{self.level.value}: {self.message}"


@dataclass
class DiagnosticLog:
    """Diagnostics collected while building one `ProplaySettings` instance."""

    items: list[Diagnostic] = field(default_factory=list)

    def add_warning(self, message: str) -> None:
        """Record a value that was ignored or replaced by its default."""
        self.items.append(Diagnostic(DiagnosticLevel.WARNING, message))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return the diagnostics as an immutable log."""
        return FrozenDiagnosticLog(tuple(self.items))


@dataclass(frozen=True)
class FrozenDiagnosticLog:
    """Immutable diagnostics attached to frozen settings."""

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
