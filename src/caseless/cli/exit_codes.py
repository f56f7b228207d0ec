"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success / predicate true
    1-9: General results and errors
    10-19: Configuration and data errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for caseless CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General (1-9)
    NO_MATCH = 1  # match / starts-with predicate was false, like grep
    USAGE_ERROR = 2  # click's own exit code for bad arguments

    # Configuration and data errors (10-19)
    CONFIG_ERROR = 11
    FOLD_TABLE_ERROR = 12
