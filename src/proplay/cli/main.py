# topmark:header:start
#
#   project      : PropLay
#   file         : main.py
#   file_relpath : src/proplay/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``proplay`` command group.

The group resolves verbosity, logging and color once and leaves the result
in ``ctx.obj`` (keys ``verbosity``, ``log_level``, ``color_enabled`` and
``console``) for the subcommands.
"""

from __future__ import annotations

import click

from proplay.cli.commands.check import check_command
from proplay.cli.commands.dump import dump_command
from proplay.cli.commands.edit import set_command, unset_command
from proplay.cli.commands.get import get_command
from proplay.cli.commands.version import version_command
from proplay.cli.console import ClickConsole
from proplay.cli.options import (
    ColorMode,
    color_options,
    resolve_color,
    resolve_verbosity,
    verbosity_options,
)
from proplay.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)

HINT = "Hint: use 'proplay check FILE...' to verify that files round-trip."


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PropLay: edit .properties files without losing their layout.",
)
@verbosity_options
@color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode,
    no_color: bool,
) -> None:
    """Set up logging and the console, or print help when no command is given."""
    obj: dict[str, object] = ctx.ensure_object(dict)

    # PROPLAY_LOG_LEVEL overrides -v and -q
    cli_level: int = resolve_verbosity(verbose, quiet)
    env_level: int | None = resolve_env_log_level()
    log_level: int = cli_level if env_level is None else env_level
    setup_logging(level=log_level)

    color: bool = resolve_color(color_mode, no_color)
    ctx.color = color
    console = ClickConsole(enable_color=color)
    obj.update(verbosity=verbose, log_level=log_level, color_enabled=color, console=console)
    logger.debug("log level %d, color %s", log_level, color)

    if ctx.invoked_subcommand is None:
        console.print(HINT)
        console.print()
        console.print(ctx.get_help())


for _command in (
    version_command,
    get_command,
    dump_command,
    set_command,
    unset_command,
    check_command,
):
    cli.add_command(_command)

if __name__ == "__main__":
    cli()
