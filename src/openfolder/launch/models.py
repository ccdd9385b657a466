"""Shell launch models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ShellKind(str, Enum):
    """Where a resolved location is opened."""

    EXPLORER = "explorer"
    CMD = "cmd"
    POWERSHELL = "powershell"

    @property
    def needs_existing_directory(self) -> bool:
        """Interactive shells must start in a directory that exists."""
        return self is not ShellKind.EXPLORER


class LaunchCommand(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ShellKind
    executable: str
    arguments: str

    @property
    def command_line(self) -> str:
        return f"{self.executable} {self.arguments}"


class LaunchError(BaseModel):
    """Failed to start the external program."""

    model_config = ConfigDict(extra="forbid")

    command_line: str
    message: str
