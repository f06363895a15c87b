# topmark:header:start
#
#   project      : PropLay
#   file         : edit.py
#   file_relpath : src/proplay/cli/commands/edit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PropLay `set` and `unset` commands.

Both commands edit a file through a layout-preserving store, so untouched
comments, blank lines and separators stay as they are. Without ``--apply``
they print a unified diff and exit with ``WOULD_CHANGE`` when the file would
change.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from proplay.cli.cmd_common import (
    get_console,
    load_store,
    preview_or_apply,
    read_text,
    resolve_settings,
)
from proplay.cli.exit_codes import ExitCode
from proplay.cli.options import apply_option, config_options
from proplay.config.logging import get_logger

if TYPE_CHECKING:
    from proplay.cli.console import ConsoleLike
    from proplay.config.model import ProplaySettings
    from proplay.store.properties import PropertiesStore

logger = get_logger(__name__)


@click.command(name="set", help="Set (or add) the value of a property.")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("key")
@click.argument("value")
@click.option(
    "--comment",
    default=None,
    help="Comment to put above the property (lines separated by \\n).",
)
@click.option(
    "--add",
    "add_value",
    is_flag=True,
    help="Add VALUE to the existing values instead of replacing them.",
)
@apply_option
@config_options
@click.pass_context
def set_command(
    ctx: click.Context,
    file: Path,
    key: str,
    value: str,
    comment: str | None,
    add_value: bool,
    apply_changes: bool,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Set KEY to VALUE in FILE."""
    settings: ProplaySettings = resolve_settings(
        ctx, config_path=config_path, no_config=no_config, start=file
    )
    original: str = read_text(file, settings)
    store: PropertiesStore = load_store(file, settings, resolve_includes=False)

    if add_value:
        store.add_value(key, value)
    else:
        store.set_value(key, value)
    if comment is not None:
        store.layout.set_comment(key, comment.replace("\\n", "\n"))
    logger.info("%s %s in %s", "Added" if add_value else "Set", key, file)

    code: ExitCode = preview_or_apply(
        ctx,
        path=file,
        original=original,
        updated=store.to_string(),
        apply_changes=apply_changes,
        settings=settings,
    )
    ctx.exit(code)


@click.command(name="unset", help="Remove a property.")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("key")
@apply_option
@config_options
@click.pass_context
def unset_command(
    ctx: click.Context,
    file: Path,
    key: str,
    apply_changes: bool,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Remove KEY from FILE together with its comment."""
    console: ConsoleLike = get_console(ctx)
    settings: ProplaySettings = resolve_settings(
        ctx, config_path=config_path, no_config=no_config, start=file
    )
    original: str = read_text(file, settings)
    store: PropertiesStore = load_store(file, settings, resolve_includes=False)

    if not store.contains_key(key):
        console.error(f"{file}: no such property: {key}")
        ctx.exit(ExitCode.FAILURE)

    store.clear_value(key)
    code: ExitCode = preview_or_apply(
        ctx,
        path=file,
        original=original,
        updated=store.to_string(),
        apply_changes=apply_changes,
        settings=settings,
    )
    ctx.exit(code)
