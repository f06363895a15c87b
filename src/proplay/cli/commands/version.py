# topmark:header:start
#
#   project      : PropLay
#   file         : version.py
#   file_relpath : src/proplay/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PropLay `version` command.

Prints the PropLay version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from proplay.cli.cli_types import EnumChoiceParam, OutputFormat
from proplay.cli.cmd_common import get_console, get_effective_verbosity
from proplay.config.io import to_toml
from proplay.constants import PROPLAY_VERSION

if TYPE_CHECKING:
    from proplay.cli.console import ConsoleLike


@click.command(name="version", help="Show the current version of PropLay.")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.TEXT,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat) -> None:
    """Show the current version of PropLay."""
    console: ConsoleLike = get_console(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": PROPLAY_VERSION}))
    elif output_format == OutputFormat.TOML:
        console.print(to_toml({"version": PROPLAY_VERSION}), nl=False)
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("PropLay version:", bold=True, underline=True))
        console.print(f"    {console.styled(PROPLAY_VERSION, bold=True)}")
    else:
        console.print(console.styled(PROPLAY_VERSION, bold=True))
