"""Exit codes for CLI commands.

Every command maps its outcome to one of these codes so that CI jobs can
branch on the process status.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (bad date override, bad arguments)
    - 2: Environment error (invalid config, GITHUB_OUTPUT not set)
    - 3: I/O error (output file not writable)
    - 4: Check failed (verify-day on a day that is not a freeze day)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 3
    CHECK_FAILED = 4

