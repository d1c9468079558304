from __future__ import annotations

import typer

from tlr.cli.commands.release_cmd import release


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)

# Single command: typer runs it directly, no subcommand name needed.
app.command()(release)


def main() -> None:
    app()
