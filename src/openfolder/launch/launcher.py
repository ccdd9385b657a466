"""Start shell commands."""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Protocol

from result import Err, Ok, Result

from openfolder.common import create_logger

from .models import LaunchCommand, LaunchError

logger = create_logger("launch")


class Launcher(Protocol):
    def launch(self, command: LaunchCommand) -> Result[LaunchCommand, LaunchError]: ...


class ProcessLauncher:
    """Starts commands as detached child processes."""

    def launch(self, command: LaunchCommand) -> Result[LaunchCommand, LaunchError]:
        # Windows takes the command line verbatim; elsewhere it is split into argv.
        args: str | list[str] = command.command_line if os.name == "nt" else shlex.split(command.command_line)
        try:
            subprocess.Popen(args)
        except OSError as e:
            return Err(LaunchError(command_line=command.command_line, message=f"Failed to start process: {e}"))

        logger.info("Launched", command_line=command.command_line)
        return Ok(command)


class DryRunLauncher:
    """Records commands instead of starting them."""

    def __init__(self) -> None:
        self.commands: list[LaunchCommand] = []

    def launch(self, command: LaunchCommand) -> Result[LaunchCommand, LaunchError]:
        self.commands.append(command)
        return Ok(command)
