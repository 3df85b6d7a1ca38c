"""Exit codes for CLI commands.

These map to shell exit status and should remain stable.
"""

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    """Process exit codes.

    - 0: Success
    - 1: User error (bad option, unreadable or invalid config)
    - 2: The example chain did not have the expected shape
    """

    OK = 0
    USER_ERROR = 1
    CHECK_FAILED = 2

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
