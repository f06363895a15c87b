# topmark:header:start
#
#   project      : PropLay
#   file         : __init__.py
#   file_relpath : src/proplay/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for PropLay.

Logging setup (`proplay.config.logging`), TOML I/O helpers
(`proplay.config.io`) and the settings model (`proplay.config.model`), read
from ``proplay.toml`` or ``[tool.proplay]`` in ``pyproject.toml``.
"""
