from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from result import is_err

from openfolder.commands import OpenFolderCommands, ResolveTarget
from openfolder.host import SnapshotError, StaticSelection, load_snapshot
from openfolder.launch import DryRunLauncher, Launcher, ProcessLauncher, ShellKind


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


SnapshotArgument = Annotated[
    Path,
    typer.Argument(help="YAML snapshot of the solution explorer selection."),
]
TargetOption = Annotated[
    ResolveTarget,
    typer.Option("--target", "-t", show_default=True, case_sensitive=False, help="Entity path or build output."),
]
SolutionOption = Annotated[
    bool,
    typer.Option("--solution", help="Use the open solution instead of the selected entities."),
]


def resolve(
    snapshot: SnapshotArgument,
    target: TargetOption = ResolveTarget.PATH,
    solution: SolutionOption = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (text or json)."),
    ] = OutputFormat.TEXT,
) -> None:
    """Print the resolved path of each selected entity."""
    with OpenFolderCommands(_load(snapshot), DryRunLauncher()) as commands:
        if solution:
            paths = [path for path in [commands.resolve_solution().unwrap_or(None)] if path is not None]
        else:
            paths = commands.resolve_selection(target)

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps([str(path) for path in paths], indent=2))
        return
    for path in paths:
        typer.echo(str(path))


def open_selection(
    snapshot: SnapshotArgument,
    shell: Annotated[
        ShellKind,
        typer.Option("--shell", "-s", show_default=True, case_sensitive=False, help="Program to open the location in."),
    ] = ShellKind.EXPLORER,
    target: TargetOption = ResolveTarget.PATH,
    solution: SolutionOption = False,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print the command lines instead of running them.")] = False,
) -> None:
    """Open the location of each selected entity."""
    launcher: Launcher = DryRunLauncher() if dry_run else ProcessLauncher()
    with OpenFolderCommands(_load(snapshot), launcher) as commands:
        launched = commands.open_solution(shell) if solution else commands.open_selection(shell, target)

    if dry_run:
        for command in launched:
            typer.echo(command.command_line)


def _load(snapshot: Path) -> StaticSelection:
    result = load_snapshot(snapshot)
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)
    return result.unwrap()


def _handle_error(error: SnapshotError) -> None:
    message = f"{error.message} ({error.path})"
    line = getattr(error, "line", None)
    field = getattr(error, "field", None)
    if line is not None:
        message = f"{message} at line {line}"
    elif field is not None:
        message = f"{message} [{field}]"

    typer.secho(message, err=True, fg=typer.colors.RED)
