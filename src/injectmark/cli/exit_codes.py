# topmark:header:start
#
#   project      : InjectMark
#   file         : exit_codes.py
#   file_relpath : src/injectmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the InjectMark CLI.

InjectMark aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `WOULD_CHANGE=2`, used to signal that a dry run found
targets to rewrite; tests must assert ``result.exception is None`` to tell it
apart from Click's own usage errors (which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the InjectMark CLI.

    Attributes:
        SUCCESS: Nothing to change, or changes applied.
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: targets would be rewritten if ``--apply`` were set.
        USAGE_ERROR: Invalid flags/args. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A target is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A target does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Error reading/writing a target. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration or options. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
