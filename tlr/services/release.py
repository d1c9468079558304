"""Release pipeline: optimized build, symbol strip, report.

Steps run strictly in order and the first failure ends the run:

1. ``cargo build --release`` in the project root
2. ``strip <target>/release/<name>`` in place
3. a completion notice naming the stripped artifact

Both tools stream their own output to the terminal. The pipeline adds only
its three notices (plus echoed command lines when ``echo_commands`` is on).
"""

from __future__ import annotations

from pathlib import Path

from tlr.core.config import RELEASE_PROFILE, ReleaseConfig
from tlr.core.errors import ErrorCode
from tlr.core.project import Project
from tlr.core.result import Err, Ok, Result
from tlr.output.console import ConsoleProtocol, Style
from tlr.platform.detection import Platform
from tlr.platform.process import run_silent
from tlr.services.release_errors import BuildFailure, ReleaseError, StripFailure

__all__ = [
    "ReleasePipeline",
    "BUILD_NOTICE",
    "STRIP_NOTICE",
    "COMPLETE_NOTICE",
]

BUILD_NOTICE = "Building Terra-Link in release mode..."
STRIP_NOTICE = "Stripping debugging symbols to minimize binary size..."
COMPLETE_NOTICE = "Release build complete! The optimized binary is located at {path}"


class ReleasePipeline:
    """Build, strip and report the Terra-Link release binary."""

    def __init__(
        self,
        *,
        project: Project,
        platform: Platform,
        config: ReleaseConfig,
        console: ConsoleProtocol,
    ) -> None:
        self._project = project
        self._platform = platform
        self._config = config
        self._console = console

    @property
    def artifact(self) -> Path:
        """Where the build step is expected to leave the binary."""
        exe_name = self._platform.exe_name(self._config.artifact.name)
        return self._project.artifact_path(self._config, exe_name)

    def run(self) -> Result[Path, ReleaseError]:
        """Run build then strip.

        Returns:
            Ok(path) with the absolute path of the stripped artifact
            Err(BuildFailure) if the build failed (strip never ran)
            Err(StripFailure) if stripping failed or had no artifact
        """
        self._console.print(BUILD_NOTICE, Style.BOLD)
        built = self._build()
        if isinstance(built, Err):
            return built

        self._console.print(STRIP_NOTICE, Style.BOLD)
        stripped = self._strip(self.artifact)
        if isinstance(stripped, Err):
            return stripped

        artifact = stripped.value
        self._console.success(COMPLETE_NOTICE.format(path=self._project.display_path(artifact)))
        return Ok(artifact)

    def _build(self) -> Result[None, BuildFailure]:
        cmd = [self._config.tools.cargo, "build", f"--{RELEASE_PROFILE}"]
        self._echo(cmd)

        result = run_silent(cmd, cwd=self._project.root)
        if isinstance(result, Err):
            error = result.error
            return Err(
                BuildFailure(
                    command=error.command,
                    returncode=error.returncode,
                    diagnostic=error.stderr,
                )
            )
        return Ok(None)

    def _strip(self, artifact: Path) -> Result[Path, StripFailure]:
        if not artifact.is_file():
            return Err(
                StripFailure(
                    artifact=artifact,
                    returncode=int(ErrorCode.IO_ERROR),
                    diagnostic=f"artifact not found: {self._project.display_path(artifact)}",
                    missing=True,
                )
            )

        cmd = [self._config.tools.strip, self._project.display_path(artifact)]
        self._echo(cmd)

        result = run_silent(cmd, cwd=self._project.root)
        if isinstance(result, Err):
            error = result.error
            return Err(
                StripFailure(
                    artifact=artifact,
                    returncode=error.returncode,
                    command=error.command,
                    diagnostic=error.stderr,
                )
            )
        return Ok(artifact)

    def _echo(self, cmd: list[str]) -> None:
        if self._config.output.echo_commands:
            self._console.print(" ".join(cmd), Style.DIM)
