"""Release command - build, strip and report the Terra-Link binary."""

from __future__ import annotations

import typer

from tlr.cli.context import build_context
from tlr.core.result import Err, Ok
from tlr.output.errors import print_release_error, release_error_exit_code
from tlr.services.release import ReleasePipeline


def release() -> None:
    """Build Terra-Link in release mode and strip its debug symbols."""
    ctx = build_context()

    pipeline = ReleasePipeline(
        project=ctx.project,
        platform=ctx.platform,
        config=ctx.config,
        console=ctx.console,
    )

    match pipeline.run():
        case Ok(_):
            return
        case Err(error):
            print_release_error(error, ctx.console)
            raise typer.Exit(code=release_error_exit_code(error))
