# topmark:header:start
#
#   project      : ValueText
#   file         : exit_codes.py
#   file_relpath : src/valuetext/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ValueText CLI.

Aligned with the BSD `sysexits` convention where practical.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ValueText CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input is not a Python literal. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Missing or invalid settings file. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    DATA_ERROR = 65
    CONFIG_ERROR = 78
