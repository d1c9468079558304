from __future__ import annotations

from dataclasses import dataclass

import typer

from tlr.core.config import ReleaseConfig, load_config_or_default
from tlr.core.errors import ErrorCode
from tlr.core.project import Project, detect_project
from tlr.core.result import Err
from tlr.output.console import ConsoleProtocol, RichConsole
from tlr.platform.detection import Platform, detect_platform


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    platform: Platform
    config: ReleaseConfig
    console: ConsoleProtocol


def build_context() -> CLIContext:
    console = RichConsole()
    project = detect_project()

    config_result = load_config_or_default(project.config_path)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        project=project,
        platform=detect_platform(),
        config=config_result.value,
        console=console,
    )
