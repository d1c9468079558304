"""Project root and artifact location.

The pipeline is run from the root of the Terra-Link cargo project. All
relative paths (target dir, release.toml, the reported artifact path) are
anchored there.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import RELEASE_PROFILE, ReleaseConfig

__all__ = ["Project", "detect_project", "CARGO_TARGET_DIR_ENV"]

# cargo's own override for the output directory
CARGO_TARGET_DIR_ENV = "CARGO_TARGET_DIR"


@dataclass(frozen=True, slots=True)
class Project:
    """A cargo project checkout rooted at ``root``."""

    root: Path

    @property
    def config_path(self) -> Path:
        """Path to the optional release.toml."""
        return self.root / "release.toml"

    def target_dir(self, config: ReleaseConfig) -> Path:
        """Directory cargo writes build output into.

        ``CARGO_TARGET_DIR`` wins over the configured value, matching cargo.
        """
        override = os.environ.get(CARGO_TARGET_DIR_ENV, "").strip()
        raw = Path(override) if override else Path(config.artifact.target_dir)
        raw = raw.expanduser()
        if raw.is_absolute():
            return raw
        return self.root / raw

    def artifact_path(self, config: ReleaseConfig, exe_name: str) -> Path:
        return self.target_dir(config) / RELEASE_PROFILE / exe_name

    def display_path(self, path: Path) -> str:
        """Render a path for the operator: root-relative when possible."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)


def detect_project() -> Project:
    """The current working directory is the project root."""
    return Project(root=Path.cwd().resolve())
