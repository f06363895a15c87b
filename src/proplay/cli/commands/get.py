# topmark:header:start
#
#   project      : PropLay
#   file         : get.py
#   file_relpath : src/proplay/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PropLay `get` command.

Prints the values of one key, one per line. With ``-v`` the comment of the
key is printed first.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from proplay.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_store,
    resolve_settings,
)
from proplay.cli.exit_codes import ExitCode
from proplay.cli.options import config_options

if TYPE_CHECKING:
    from proplay.cli.console import ConsoleLike
    from proplay.config.model import ProplaySettings
    from proplay.store.properties import PropertiesStore


@click.command(name="get", help="Print the value(s) of a property.")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("key")
@config_options
@click.pass_context
def get_command(
    ctx: click.Context,
    file: Path,
    key: str,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Print the values of KEY in FILE."""
    console: ConsoleLike = get_console(ctx)
    settings: ProplaySettings = resolve_settings(
        ctx, config_path=config_path, no_config=no_config, start=file
    )
    store: PropertiesStore = load_store(file, settings)

    if not store.contains_key(key):
        console.error(f"{file}: no such property: {key}")
        ctx.exit(ExitCode.FAILURE)

    if get_effective_verbosity(ctx) > 0:
        comment: str | None = store.layout.get_canonical_comment(key, False)
        if comment:
            console.print(console.styled(comment, dim=True))
    for value in store.get_list(key):
        console.print(value)
