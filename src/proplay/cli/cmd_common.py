# topmark:header:start
#
#   project      : PropLay
#   file         : cmd_common.py
#   file_relpath : src/proplay/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the commands: settings resolution, loading a store
with library errors translated to CLI errors, and the preview-or-apply step of
the editing commands.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

import click

from proplay.cli.errors import (
    ProplayConfigError,
    ProplayEncodingError,
    ProplayFileNotFoundError,
    ProplayIOError,
    ProplayPermissionDeniedError,
)
from proplay.cli.exit_codes import ExitCode
from proplay.config.logging import get_logger
from proplay.config.model import ProplaySettings
from proplay.errors import IncludeCycleError, IncludeNotFoundError, PropertiesParseError
from proplay.utils.diff import format_patch, make_patch

if TYPE_CHECKING:
    from collections.abc import Iterator

    from proplay.cli.console import ConsoleLike
    from proplay.store.properties import PropertiesStore

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the ``proplay`` group."""
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (count of ``-v``, 0 when terse)."""
    return int(ctx.obj.get("verbosity", 0))


def resolve_settings(
    ctx: click.Context,
    *,
    config_path: str | None,
    no_config: bool,
    start: Path,
) -> ProplaySettings:
    """Return the settings for a command and report their diagnostics.

    Args:
        ctx (click.Context): Current Click context.
        config_path (str | None): Explicit settings file (``--config``).
        no_config (bool): Ignore configuration files (``--no-config``).
        start (Path): Where discovery starts (usually the first input file).

    Raises:
        ProplayConfigError: If ``--config`` names a pyproject without a
            ``[tool.proplay]`` table.
    """
    if no_config:
        settings: ProplaySettings = ProplaySettings.from_defaults()
    elif config_path is not None:
        found: ProplaySettings | None = ProplaySettings.from_toml_file(Path(config_path))
        if found is None:
            raise ProplayConfigError(f"No [tool.proplay] table in {config_path}")
        settings = found
    else:
        settings = ProplaySettings.discover(start)

    console: ConsoleLike = get_console(ctx)
    for diagnostic in settings.diagnostics:
        console.warn(f"{settings.config_file or '<defaults>'}: {diagnostic}")
    return settings


@contextmanager
def translated_errors(path: Path | str) -> Iterator[None]:
    """Turn library and filesystem errors into CLI errors with proper exit codes.

    Exit code mapping:
        FILE_NOT_FOUND: FileNotFoundError, IsADirectoryError, IncludeNotFoundError
        PERMISSION_DENIED: PermissionError
        ENCODING_ERROR: PropertiesParseError, UnicodeError
        CONFIG_ERROR: IncludeCycleError
        IO_ERROR: any other OSError
    """
    try:
        yield
    except (FileNotFoundError, IsADirectoryError) as e:
        logger.error("Filesystem error while processing %s: %s", path, e)
        raise ProplayFileNotFoundError(f"{path}: {e}") from e
    except PermissionError as e:
        raise ProplayPermissionDeniedError(f"{path}: {e}") from e
    except OSError as e:
        raise ProplayIOError(f"{path}: {e}") from e
    except UnicodeError as e:
        raise ProplayEncodingError(f"Encoding error in {path}: {e}") from e
    except PropertiesParseError as e:
        raise ProplayEncodingError(str(e)) from e
    except IncludeNotFoundError as e:
        raise ProplayFileNotFoundError(f"{path}: {e}") from e
    except IncludeCycleError as e:
        raise ProplayConfigError(f"{path}: {e}") from e


def read_text(path: Path, settings: ProplaySettings) -> str:
    """Return the exact text of ``path`` (line breaks untouched)."""
    with translated_errors(path), path.open(encoding=settings.encoding, newline="") as fp:
        return fp.read()


def load_store(
    path: Path, settings: ProplaySettings, *, resolve_includes: bool = True
) -> PropertiesStore:
    """Return a store configured by ``settings`` and loaded from ``path``.

    Commands that write the file back pass ``resolve_includes=False``: include
    directives then load as ordinary properties and are saved unchanged,
    instead of being replaced by the properties of the included files.
    """
    if not resolve_includes:
        settings = replace(settings, include_key=None, include_optional_key=None)
    store: PropertiesStore = settings.new_store()
    with translated_errors(path):
        store.load_file(path)
    return store


def preview_or_apply(
    ctx: click.Context,
    *,
    path: Path,
    original: str,
    updated: str,
    apply_changes: bool,
    settings: ProplaySettings,
) -> ExitCode:
    """Write ``updated`` to ``path`` or print the diff that writing would cause.

    Returns:
        ExitCode: ``SUCCESS`` if nothing changes or the change was written,
            ``WOULD_CHANGE`` if a change was only previewed.
    """
    console: ConsoleLike = get_console(ctx)
    if original == updated:
        console.print(f"{path}: unchanged")
        return ExitCode.SUCCESS

    if apply_changes:
        with translated_errors(path), path.open(
            "w", encoding=settings.encoding, newline=""
        ) as fp:
            fp.write(updated)
        console.print(console.styled(f"{path}: updated", fg="green"))
        return ExitCode.SUCCESS

    patch: list[str] = make_patch(original, updated, str(path))
    console.print(format_patch(patch, color=ctx.obj.get("color_enabled", False)), nl=False)
    return ExitCode.WOULD_CHANGE
