# topmark:header:start
#
#   project      : Jsonnetic
#   file         : exit_codes.py
#   file_relpath : src/jsonnetic/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Jsonnetic CLI.

Values follow the BSD `sysexits` convention where practical, so other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Jsonnetic CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, e.g. input data with no Jsonnet representation.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8 or not a valid document.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading the input. Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
