# topmark:header:start
#
#   project      : PropLay
#   file         : options.py
#   file_relpath : src/proplay/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click options shared by the ``proplay`` group and its commands.

Each ``*_options`` function is a decorator adding a group of related options;
the ``resolve_*`` helpers turn their raw values into what the commands use.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Any, Callable, TypeVar

import click

from proplay.cli.cli_types import EnumChoiceParam
from proplay.cli.errors import ProplayUsageError
from proplay.config.logging import TRACE_LEVEL

FC = TypeVar("FC", bound=Callable[..., Any])

# Log level by number of -v flags; three or more means TRACE.
_VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _stacked(*decorators: Callable[[FC], FC]) -> Callable[[FC], FC]:
    """Combine option decorators; they appear in ``--help`` in the given order."""

    def apply(f: FC) -> FC:
        for decorator in reversed(decorators):
            f = decorator(f)
        return f

    return apply


verbosity_options = _stacked(
    click.option("-v", "--verbose", count=True, help="More output; repeat for up to three levels."),
    click.option("-q", "--quiet", count=True, help="Log errors only."),
)

color_options = _stacked(
    click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=ColorMode.AUTO,
        help="When to color the output (default: auto).",
    ),
    click.option("--no-color", is_flag=True, help="Same as --color=never."),
)

config_options = _stacked(
    click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        help="Read settings from this proplay.toml or pyproject.toml.",
    ),
    click.option("--no-config", is_flag=True, help="Use the default settings."),
)

apply_option = click.option(
    "--apply",
    "apply_changes",
    is_flag=True,
    help="Write the file. Without this flag only the diff is printed.",
)


def resolve_verbosity(verbose: int, quiet: int) -> int:
    """Return the log level for ``-v`` and ``-q`` counts.

    Raises:
        ProplayUsageError: If both flags are given.
    """
    if verbose and quiet:
        raise ProplayUsageError("--verbose and --quiet cannot be combined")
    if quiet:
        return logging.ERROR
    return _VERBOSE_LEVELS[min(verbose, len(_VERBOSE_LEVELS) - 1)]


def resolve_color(mode: ColorMode, no_color: bool) -> bool:
    """Return True if output should be colored.

    ``--no-color`` and ``--color`` decide first. In ``auto`` mode a non-zero
    ``FORCE_COLOR`` turns color on, a set ``NO_COLOR`` turns it off, and
    otherwise color follows whether stdout is a terminal.
    """
    if no_color or mode is ColorMode.NEVER:
        return False
    if mode is ColorMode.ALWAYS:
        return True
    if os.environ.get("FORCE_COLOR", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    isatty: Callable[[], bool] | None = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())
