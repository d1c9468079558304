"""Failure variants returned by the release pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class BuildFailure:
    """cargo could not be launched or exited non-zero."""

    command: tuple[str, ...]
    returncode: int
    diagnostic: str = ""


@dataclass(frozen=True, slots=True)
class StripFailure:
    """strip could not be launched or exited non-zero, or had nothing to strip.

    ``missing`` is set when the artifact was absent and strip never ran.
    """

    artifact: Path
    returncode: int
    command: tuple[str, ...] = ()
    diagnostic: str = ""
    missing: bool = False


ReleaseError = BuildFailure | StripFailure
