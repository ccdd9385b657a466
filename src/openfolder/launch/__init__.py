"""Open resolved locations in a file browser or shell."""

from .launcher import DryRunLauncher, Launcher, ProcessLauncher
from .models import LaunchCommand, LaunchError, ShellKind
from .templates import build_launch_command

__all__ = [
    "DryRunLauncher",
    "LaunchCommand",
    "LaunchError",
    "Launcher",
    "ProcessLauncher",
    "ShellKind",
    "build_launch_command",
]
