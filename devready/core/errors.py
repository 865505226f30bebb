"""Error codes for CLI exit status.

These map to shell exit codes and are used consistently by the CLI to signal
why a run did not succeed.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success (every checked dependency is installed)
    - 1: User error (bad input, invalid arguments)
    - 2: Environment error (missing dependency, invalid workspace)
    - 5: I/O error (results could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
