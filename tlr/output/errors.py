"""Error presentation utilities.

Release failures are mostly reported by the failing tool itself, whose
output has already streamed to the terminal. Only failures where the tool
never ran get a message of our own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tlr.core.errors import ErrorCode
from tlr.services.release_errors import BuildFailure, ReleaseError, StripFailure

if TYPE_CHECKING:
    from tlr.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print what the failing collaborator could not print itself."""
    match error:
        case BuildFailure(diagnostic=diagnostic) | StripFailure(diagnostic=diagnostic):
            if diagnostic:
                console.error(diagnostic)


def release_error_exit_code(error: ReleaseError) -> int:
    """Exit code for a release failure: the failing step's own status."""
    match error:
        case BuildFailure(returncode=rc) | StripFailure(returncode=rc) if rc > 0:
            return rc
    return int(ErrorCode.BUILD_ERROR)
