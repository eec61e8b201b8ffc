"""Standardized exit codes for promptis.

Following POSIX conventions and common CLI practices.
"""

import sys
from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used when promptis ends the process."""

    SUCCESS = 0
    """Quit sentinel entered, or input stream closed."""

    INTERRUPTED = 130
    """User interrupted with SIGINT (Ctrl+C)."""


def exit_with_code(code: ExitCode) -> None:
    """Exit with the specified exit code.

    Args:
        code: The exit code to use.
    """
    sys.exit(code)
