# topmark:header:start
#
#   project      : PropLay
#   file         : logging.py
#   file_relpath : src/proplay/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for PropLay.

Every module logs through `get_logger(__name__)`, which returns a
`ProplayLogger` with an extra TRACE level below DEBUG. The layout code traces
each line it reads and each event it handles; those records are only
interesting when hunting a layout bug.

Library code never installs handlers. `setup_logging` is called by the CLI
(and by the test suite) and attaches one `yachalk`-colored stderr handler to
the root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from proplay.constants import LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"


class ProplayLogger(logging.Logger):
    """A `logging.Logger` that also has `trace`."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ProplayLogger)

# Highest threshold first; a record takes the style of the first threshold it reaches.
_LEVEL_STYLES: tuple[tuple[int, Callable[[str], str]], ...] = (
    (logging.ERROR, chalk.red_bright),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Colors each formatted record by its level."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, paint in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


def parse_log_level(text: str) -> int | None:
    """Return the level named by ``text`` (``"trace"``, ``"DEBUG"``, ``"10"``...).

    Returns None for names `logging` does not know.
    """
    name: str = text.strip().upper()
    if name.isdigit():
        return int(name)
    level: object = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def resolve_env_log_level() -> int | None:
    """Return the level set by ``PROPLAY_LOG_LEVEL``, or None if unset or unknown."""
    value: str | None = os.environ.get(LOG_LEVEL_ENV)
    return parse_log_level(value) if value else None


def setup_logging(level: int | None = None) -> None:
    """Send log records of ``level`` and above to stderr.

    Without ``level``, ``PROPLAY_LOG_LEVEL`` decides, and only critical
    records are shown when it is unset too. Handlers installed by earlier
    calls are replaced.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))

    root: logging.Logger = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> ProplayLogger:
    """Return the `ProplayLogger` called ``name``."""
    return cast("ProplayLogger", logging.getLogger(name))
