"""Command line templates for the supported shells."""

from __future__ import annotations

from pathlib import Path

from .models import LaunchCommand, ShellKind

_TEMPLATES: dict[ShellKind, tuple[str, str]] = {
    ShellKind.EXPLORER: ("explorer.exe", '"{path}"'),
    ShellKind.CMD: ("cmd.exe", '/K "cd /D {path}"'),
    ShellKind.POWERSHELL: ("powershell.exe", '-NoExit -Command "Set-Location -Path {path}"'),
}


def build_launch_command(kind: ShellKind, directory: Path | str) -> LaunchCommand:
    executable, arguments = _TEMPLATES[kind]
    return LaunchCommand(kind=kind, executable=executable, arguments=arguments.format(path=directory))
