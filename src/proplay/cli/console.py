# topmark:header:start
#
#   project      : PropLay
#   file         : console.py
#   file_relpath : src/proplay/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output of the PropLay CLI.

Results (values, dumps, diffs, verdicts) go through the console stored in
``ctx.obj["console"]``. Log records never do: they go to the root logger's
handler set up by `proplay.config.logging`.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a result line to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` with `click.style` attributes, or unchanged without color."""
        ...


class ClickConsole(ConsoleLike):
    """Console writing with `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styles.
        out (TextIO | None): Result stream; `sys.stdout` by default.
        err (TextIO | None): Warning and error stream; `sys.stderr` by default.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def _echo(self, text: str, stream: TextIO, nl: bool, **style_kwargs: Any) -> None:
        click.echo(self.styled(text, **style_kwargs), nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self._echo(text, self.out, nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        self._echo(text, self.err, nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        self._echo(text, self.err, nl, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        if not self.enable_color or not style_kwargs:
            return text
        return click.style(text, **style_kwargs)
