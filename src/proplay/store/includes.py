# topmark:header:start
#
#   project      : PropLay
#   file         : includes.py
#   file_relpath : src/proplay/store/includes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolution of include directives.

An include directive is a property whose key is the store's include key
(``include`` or ``includeoptional`` by default). Its value names one or more
sources; each is expanded, resolved to a canonical name and opened by an
`IncludeResolver`. The canonical name is what ends up on the include stack,
so it must identify a source uniquely for cycle detection to work.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Final, Protocol

from proplay.config.logging import get_logger
from proplay.constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from typing import TextIO

    from proplay.config.logging import ProplayLogger
    from proplay.layout.loader import IncludeStack

logger: ProplayLogger = get_logger(__name__)

# Returns the replacement for a ``${name}`` reference, or None if unknown.
Lookup = Callable[[str], str | None]

_VARIABLE_RE: Final[re.Pattern[str]] = re.compile(r"\$\{([^${}]+)\}")


def expand_variables(text: str, lookup: Lookup | None) -> str:
    """Replace ``${name}`` references in ``text`` using ``lookup``.

    References ``lookup`` cannot resolve are left as they are.

    Args:
        text (str): The text to expand.
        lookup (Lookup | None): Variable lookup; None disables expansion.

    Returns:
        str: The expanded text.
    """
    if lookup is None or "${" not in text:
        return text

    def _replace(match: re.Match[str]) -> str:
        value: str | None = lookup(match.group(1))
        return match.group(0) if value is None else value

    return _VARIABLE_RE.sub(_replace, text)


class IncludeResolver(Protocol):
    """Locate and open the sources named by include directives."""

    def resolve(self, name: str, sources: IncludeStack) -> str:
        """Return the canonical name of ``name`` included from ``sources[-1]``."""
        ...

    def open(self, resolved: str) -> TextIO:
        """Open a resolved source for reading.

        Raises:
            OSError: If the source cannot be opened.
        """
        ...


class FileIncludeResolver:
    """Resolve include directives to local files.

    Relative names are resolved against the directory of the including file
    (the innermost entry of the include stack) or, for streams without a file
    name, against ``base_dir`` (the current directory by default).

    Args:
        base_dir (Path | None): Directory for includes of anonymous streams.
        encoding (str): Encoding used to open included files.
    """

    def __init__(self, base_dir: Path | None = None, encoding: str = DEFAULT_ENCODING) -> None:
        self.base_dir = base_dir
        self.encoding = encoding

    def resolve(self, name: str, sources: IncludeStack) -> str:
        """Return the absolute path of ``name`` as a string."""
        path = Path(name).expanduser()
        if not path.is_absolute():
            if sources:
                parent: Path = Path(sources[-1]).parent
            else:
                parent = self.base_dir if self.base_dir is not None else Path.cwd()
            path = parent / path
        resolved = str(path.resolve())
        logger.trace("Resolved include %r to %s", name, resolved)
        return resolved

    def open(self, resolved: str) -> TextIO:
        """Open ``resolved`` as text, keeping its line breaks."""
        return open(resolved, encoding=self.encoding, newline="")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_dir={self.base_dir!r}, encoding={self.encoding!r})"
