# topmark:header:start
#
#   project      : PropLay
#   file         : __init__.py
#   file_relpath : src/proplay/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line interface of PropLay.

Inspect and edit properties files without disturbing their comments, blank
lines and separators. The entry point is `proplay.cli.main.cli`.
"""
