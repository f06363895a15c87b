# topmark:header:start
#
#   project      : PropLay
#   file         : dump.py
#   file_relpath : src/proplay/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PropLay `dump` command.

Prints the logical content of a properties file, after includes are resolved
and list values are split:

* ``text``: one ``key = value`` line per value;
* ``json``: an object mapping keys to a string or a list of strings;
* ``toml``: the same mapping as a TOML document.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from proplay.cli.cli_types import EnumChoiceParam, OutputFormat
from proplay.cli.cmd_common import get_console, load_store, resolve_settings
from proplay.cli.options import config_options
from proplay.config.io import to_toml

if TYPE_CHECKING:
    from proplay.cli.console import ConsoleLike
    from proplay.config.model import ProplaySettings
    from proplay.store.properties import PropertiesStore


def store_to_dict(store: PropertiesStore) -> dict[str, str | list[str]]:
    """Return the store as a mapping; keys with several values map to lists."""
    return {key: values[0] if len(values) == 1 else values for key, values in store.items()}


@click.command(name="dump", help="Print all properties of a file.")
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.TEXT,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@config_options
@click.pass_context
def dump_command(
    ctx: click.Context,
    file: Path,
    output_format: OutputFormat,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Print the properties of FILE."""
    console: ConsoleLike = get_console(ctx)
    settings: ProplaySettings = resolve_settings(
        ctx, config_path=config_path, no_config=no_config, start=file
    )
    store: PropertiesStore = load_store(file, settings)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(store_to_dict(store), indent=2, ensure_ascii=False))
    elif output_format == OutputFormat.TOML:
        console.print(to_toml(store_to_dict(store)), nl=False)
    else:
        for key, values in store.items():
            for value in values:
                console.print(f"{console.styled(key, bold=True)} = {value}")
