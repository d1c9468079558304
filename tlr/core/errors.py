"""Error codes for CLI exit status.

A failing collaborator's own exit status is passed through unchanged, so
most codes here only cover what happens around the external tools:
- 0: Success
- 1: User error (invalid release.toml)
- 3: Build error (step failed without a usable status)
- 5: I/O error (artifact not found)
- 126/127: shell conventions for a program that could not be executed
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the release command.

    These values are used as process exit codes and should remain stable.
    """

    OK = 0
    USER_ERROR = 1
    BUILD_ERROR = 3
    IO_ERROR = 5
    COMMAND_NOT_EXECUTABLE = 126
    COMMAND_NOT_FOUND = 127
