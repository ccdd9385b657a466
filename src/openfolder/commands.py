"""Solution explorer actions: resolve the selection and open it."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from types import TracebackType

from result import Err, Ok, Result

from openfolder.common import create_logger
from openfolder.host import CoordinatorThread, HostSelection
from openfolder.launch import LaunchCommand, Launcher, ShellKind, build_launch_command
from openfolder.paths import is_directory
from openfolder.resolution import (
    NotFoundError,
    ResolvedPath,
    SelectedEntity,
    SelectedSolution,
    first_existing_directory,
    resolve_entity_output_path,
    resolve_entity_path,
    selected_entities,
)

logger = create_logger("commands")


class ResolveTarget(str, Enum):
    """Which location of a selected entity to use."""

    PATH = "path"
    OUTPUT = "output"


class OpenFolderCommands:
    """Actions bound to one host selection.

    Created and used on the host's coordinator thread; every action checks it.
    Use as a context manager, or call :meth:`close`, to unbind from the host.
    """

    def __init__(
        self,
        host: HostSelection,
        launcher: Launcher,
        coordinator: CoordinatorThread | None = None,
    ) -> None:
        self._host: HostSelection | None = host
        self._launcher = launcher
        self._coordinator = coordinator or CoordinatorThread()

    def __enter__(self) -> OpenFolderCommands:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._host = None

    def resolve_solution(self) -> Result[ResolvedPath, NotFoundError]:
        host = self._bound_host()
        if host.solution is None:
            return Err(NotFoundError(context="solution", message="No solution is open"))
        return resolve_entity_path(SelectedSolution(host.solution))

    def resolve_selection(self, target: ResolveTarget = ResolveTarget.PATH) -> list[ResolvedPath]:
        """Resolve every selected entity; entities without a usable path are left out."""
        host = self._bound_host()
        resolved = []
        for entity in selected_entities(host.selected_items):
            match _resolve(entity, target):
                case Ok(path):
                    resolved.append(path)
                case Err(error):
                    _log_skipped(error)
        return resolved

    def open_solution(self, shell: ShellKind) -> list[LaunchCommand]:
        return self._open([self.resolve_solution()], shell)

    def open_selection(self, shell: ShellKind, target: ResolveTarget = ResolveTarget.PATH) -> list[LaunchCommand]:
        """Open every selected entity in ``shell``; returns the commands launched."""
        host = self._bound_host()
        results = [_resolve(entity, target) for entity in selected_entities(host.selected_items)]
        return self._open(results, shell)

    def _open(self, results: list[Result[ResolvedPath, NotFoundError]], shell: ShellKind) -> list[LaunchCommand]:
        launched = []
        for result in results:
            command = result.and_then(lambda path: _launch_location(path, shell)).map(
                lambda location: build_launch_command(shell, location)
            )
            match command:
                case Ok(cmd):
                    self._launcher.launch(cmd).inspect(launched.append).inspect_err(
                        lambda error: logger.error(
                            "Failed to launch", command_line=error.command_line, error=error.message
                        )
                    )
                case Err(error):
                    _log_skipped(error)
        return launched

    def _bound_host(self) -> HostSelection:
        self._coordinator.require()
        if self._host is None:
            raise RuntimeError("Commands are closed")
        return self._host


def _resolve(entity: SelectedEntity, target: ResolveTarget) -> Result[ResolvedPath, NotFoundError]:
    match target:
        case ResolveTarget.PATH:
            return resolve_entity_path(entity)
        case ResolveTarget.OUTPUT:
            return resolve_entity_output_path(entity)
        case _:
            raise ValueError(f"Unexpected target: {target}")


def _launch_location(path: ResolvedPath, shell: ShellKind) -> Result[ResolvedPath, NotFoundError]:
    if shell.needs_existing_directory:
        return first_existing_directory(path)
    if is_directory(str(path)):
        return Ok(path)
    return Ok(ResolvedPath(Path(path).parent))


def _log_skipped(error: NotFoundError) -> None:
    logger.debug("Nothing to open", context=error.context, reason=error.message)
