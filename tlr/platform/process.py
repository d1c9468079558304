"""Subprocess execution with Result-based error handling.

The release steps stream their output straight to the terminal, so the
wrapper here never captures stdout/stderr. A failing command comes back as
a ``ProcessError`` whose ``returncode`` follows POSIX shell conventions:

    127  program not found
    126  program found but could not be executed
    128+N  program killed by signal N

Usage:
    match run_silent(["cargo", "build", "--release"], cwd=root):
        case Ok(None):
            ...
        case Err(error):
            sys.exit(error.returncode)
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from tlr.core.errors import ErrorCode
from tlr.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_silent", "shell_exit_status"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Shell-style exit status (never 0).
        stderr: Launch diagnostic when the program never started, else empty.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str = ""


def shell_exit_status(returncode: int) -> int:
    """Map a ``Popen.returncode`` to the status a shell would report."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_silent(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command, letting its output stream to the terminal.

    Blocks until the command exits; there is no timeout.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(None) on exit status 0, Err(ProcessError) otherwise.
    """
    program = cmd[0] if cmd else ""
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            check=False,
        )
    except FileNotFoundError:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=int(ErrorCode.COMMAND_NOT_FOUND),
                stderr=f"{program}: command not found",
            )
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=int(ErrorCode.COMMAND_NOT_EXECUTABLE),
                stderr=f"{program}: {e.strerror or e}",
            )
        )

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=shell_exit_status(proc.returncode),
            )
        )

    return Ok(None)
