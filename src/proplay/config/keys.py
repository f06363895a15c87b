# topmark:header:start
#
#   project      : PropLay
#   file         : keys.py
#   file_relpath : src/proplay/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for PropLay configuration.

These keys are the external configuration API, as it appears at the top level
of ``proplay.toml`` and in ``[tool.proplay]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by PropLay configuration.

    The ordering of constants mirrors `proplay.config.io.load_defaults_dict`.
    """

    # Reading and writing files
    KEY_ENCODING: Final[str] = "encoding"
    KEY_ESCAPE_UNICODE: Final[str] = "escape_unicode"

    # Values
    KEY_LIST_DELIMITER: Final[str] = "list_delimiter"

    # Layout
    KEY_SEPARATOR: Final[str] = "separator"
    KEY_FORCE_SINGLE_LINE: Final[str] = "force_single_line"
    KEY_LINE_SEPARATOR: Final[str] = "line_separator"
    KEY_KEEP_TRAILING_BLANK_LINES: Final[str] = "keep_trailing_blank_lines"

    # Includes
    KEY_INCLUDE_KEY: Final[str] = "include_key"
    KEY_INCLUDE_OPTIONAL_KEY: Final[str] = "include_optional_key"
    KEY_INCLUDES_ALLOWED: Final[str] = "includes_allowed"
