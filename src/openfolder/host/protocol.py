"""Protocols the IDE adapter implements.

All reads through these protocols must happen on the host's coordinator
thread, the one thread the host uses for every access to its UI model.
See :class:`openfolder.host.coordinator.CoordinatorThread`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Protocol


class PropertyAccessError(Exception):
    """Raised by a host when a single property cannot be read right now."""


class PropertyEntry(Protocol):
    """One named property of a host object.

    Reading ``name`` or ``value`` may raise for an individual entry; readers
    skip such entries instead of failing the whole read.
    """

    @property
    def name(self) -> str: ...

    @property
    def value(self) -> Any: ...  # noqa: ANN401


type PropertySource = Iterable[PropertyEntry | None]


class HostSolution(Protocol):
    @property
    def full_name(self) -> str: ...


class HostProject(Protocol):
    @property
    def properties(self) -> PropertySource | None: ...

    @property
    def active_configuration(self) -> PropertySource | None:
        """Properties of the active build configuration, if the host exposes them directly."""
        ...


class HostProjectItem(Protocol):
    @property
    def properties(self) -> PropertySource | None: ...


class HostSelectedItem(Protocol):
    """One entry of the host selection; at most one of the two is set."""

    @property
    def project(self) -> HostProject | None: ...

    @property
    def project_item(self) -> HostProjectItem | None: ...


class HostSelection(Protocol):
    @property
    def solution(self) -> HostSolution | None: ...

    @property
    def selected_items(self) -> Sequence[HostSelectedItem]: ...
