"""Platform abstraction layer."""

from .detection import (
    Platform,
    detect_platform,
)
from .process import (
    ProcessError,
    run_silent,
    shell_exit_status,
)

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    # process
    "ProcessError",
    "run_silent",
    "shell_exit_status",
]
