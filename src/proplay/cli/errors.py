# topmark:header:start
#
#   project      : PropLay
#   file         : errors.py
#   file_relpath : src/proplay/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI exceptions, one per exit code.

Commands raise these (usually through `proplay.cli.cmd_common.translated_errors`)
and Click turns them into a message on stderr and the class's exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from proplay.cli.exit_codes import ExitCode


class ProplayCliError(click.ClickException):
    """A failed command; exits with `ExitCode.FAILURE` unless a subclass says otherwise."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message through the ``proplay`` console, or plainly without one."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = ctx.obj if ctx is not None else None
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(self.format_message())


class ProplayUsageError(ProplayCliError):
    """Conflicting or invalid command-line options."""

    exit_code = ExitCode.USAGE_ERROR


class ProplayConfigError(ProplayCliError):
    """Unusable ``--config`` file or an include cycle."""

    exit_code = ExitCode.CONFIG_ERROR


class ProplayFileNotFoundError(ProplayCliError):
    """Missing input file or mandatory include."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ProplayPermissionDeniedError(ProplayCliError):
    """A file could not be read or written for lack of permission."""

    exit_code = ExitCode.PERMISSION_DENIED


class ProplayIOError(ProplayCliError):
    """Any other operating system error on a file."""

    exit_code = ExitCode.IO_ERROR


class ProplayEncodingError(ProplayCliError):
    """Text that cannot be decoded or parsed as properties."""

    exit_code = ExitCode.ENCODING_ERROR
