from __future__ import annotations

import os
from typing import Annotated

import typer

from openfolder.common import create_logger, setup_cli_logging
from openfolder.settings import get_settings

from .commands import selection as selection_commands

logger = create_logger("cli")

app = typer.Typer(help="Open solution explorer selections in a file browser or shell.")
app.command("resolve")(selection_commands.resolve)
app.command("open")(selection_commands.open_selection)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)
        logger.debug("CLI logging initialized", config=settings.logging.model_dump())


def main() -> None:
    """Entrypoint for the openfolder CLI."""
    _setup_logging()
    app()
