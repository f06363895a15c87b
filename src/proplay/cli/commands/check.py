# topmark:header:start
#
#   project      : PropLay
#   file         : check.py
#   file_relpath : src/proplay/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PropLay `check` command.

Loads every file and saves it again in memory. A file passes when the saved
text is identical to the original. Include directives are kept as written
and the included files are not read. With ``-v`` the diff of failing files is
printed as well.

Exit codes:
    SUCCESS: every file round-trips.
    WOULD_CHANGE: at least one file would be rewritten differently.
    any error code: the first error encountered (reading continues with the
    next file).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from proplay.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_store,
    read_text,
    resolve_settings,
)
from proplay.cli.errors import ProplayCliError
from proplay.cli.exit_codes import ExitCode
from proplay.cli.options import config_options
from proplay.config.logging import get_logger
from proplay.utils.diff import format_patch, make_patch

if TYPE_CHECKING:
    from proplay.cli.console import ConsoleLike
    from proplay.config.model import ProplaySettings

logger = get_logger(__name__)


@click.command(name="check", help="Verify that files survive a load/save round trip unchanged.")
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@config_options
@click.pass_context
def check_command(
    ctx: click.Context,
    files: tuple[Path, ...],
    config_path: str | None,
    no_config: bool,
) -> None:
    """Check that each of FILES round-trips byte for byte."""
    console: ConsoleLike = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)
    error_code: ExitCode | None = None
    changed = 0

    for path in files:
        try:
            settings: ProplaySettings = resolve_settings(
                ctx, config_path=config_path, no_config=no_config, start=path
            )
            original: str = read_text(path, settings)
            updated: str = load_store(path, settings, resolve_includes=False).to_string()
        except ProplayCliError as e:
            console.error(e.format_message())
            error_code = error_code or ExitCode(e.exit_code)
            continue

        if original == updated:
            console.print(f"{console.styled('✔', fg='green')} {path}")
            continue

        changed += 1
        console.print(f"{console.styled('✘', fg='red')} {path} does not round-trip")
        if verbosity > 0:
            patch: list[str] = make_patch(original, updated, str(path))
            console.print(
                format_patch(patch, color=ctx.obj.get("color_enabled", False)), nl=False
            )

    logger.info("Checked %d file(s), %d would change", len(files), changed)
    if error_code is not None:
        ctx.exit(error_code)
    if changed:
        ctx.exit(ExitCode.WOULD_CHANGE)
