# topmark:header:start
#
#   project      : PropLay
#   file         : __init__.py
#   file_relpath : src/proplay/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``proplay`` command."""
