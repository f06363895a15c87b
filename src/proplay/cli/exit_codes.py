# topmark:header:start
#
#   project      : PropLay
#   file         : exit_codes.py
#   file_relpath : src/proplay/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PropLay CLI.

PropLay aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `WOULD_CHANGE=2`, used when a command run without
``--apply`` would modify a file. Click also exits with 2 on usage errors, so
tests must assert `result.exception is None` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PropLay CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (for example a missing key).
        WOULD_CHANGE: Changes would be made if ``--apply`` were set, or a file
            does not round-trip.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Malformed properties text or a decoding error. Mirrors
            BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path (or mandatory include) does not exist.
            Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration or include cycle. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
