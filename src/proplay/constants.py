# topmark:header:start
#
#   project      : PropLay
#   file         : constants.py
#   file_relpath : src/proplay/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PropLay Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    PROPLAY_VERSION: str = get_version("proplay")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    PROPLAY_VERSION = "0.0.0"

# Characters that start a comment line.
COMMENT_CHARS: Final[str] = "#!"

# Prefix used when a comment line has to be turned into a real comment on save.
COMMENT_PREFIX: Final[str] = "# "

# Separator written between key and value unless configured otherwise.
DEFAULT_SEPARATOR: Final[str] = " = "

# Characters that may separate a key from its value (besides whitespace).
SEPARATORS: Final[str] = "=:"

# Whitespace recognized inside property lines.
WHITE_SPACE: Final[str] = " \t\f"

# Escape marker for line continuations and escaped characters.
ESCAPE: Final[str] = "\\"

# Internal line break used inside stored comments.
CR: Final[str] = "\n"

# Default keys of include directives.
DEFAULT_INCLUDE_KEY: Final[str] = "include"
DEFAULT_INCLUDE_OPTIONAL_KEY: Final[str] = "includeoptional"

DEFAULT_ENCODING: Final[str] = "utf-8"

# Name of the standalone configuration file and its pyproject.toml section.
DEFAULT_TOML_CONFIG_NAME: Final[str] = "proplay.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "tool.proplay"

# Environment variable consulted for the log level.
LOG_LEVEL_ENV: Final[str] = "PROPLAY_LOG_LEVEL"
