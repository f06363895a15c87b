# topmark:header:start
#
#   project      : PropLay
#   file         : __main__.py
#   file_relpath : src/proplay/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PropLay via ``python -m proplay``.

Equivalent to running the ``proplay`` console script.

Examples:
    Check that a file survives a load/save cycle unchanged::

        python -m proplay check app.properties
"""

from __future__ import annotations

from proplay.cli.main import cli

if __name__ == "__main__":
    cli()
