# topmark:header:start
#
#   project      : TermWriter
#   file         : exit_codes.py
#   file_relpath : src/termwriter/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Exit codes for the TermWriter CLI, aligned with BSD `sysexits` where practical."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TermWriter CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
