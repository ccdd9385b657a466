"""In-memory host objects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .protocol import PropertyEntry


@dataclass(frozen=True)
class StaticProperty:
    name: str
    value: Any


def static_properties(data: Mapping[str, Any] | None) -> list[PropertyEntry] | None:
    if data is None:
        return None
    return [StaticProperty(name=name, value=value) for name, value in data.items()]


@dataclass(frozen=True)
class StaticSolution:
    full_name: str


@dataclass(frozen=True)
class StaticProject:
    properties: Sequence[PropertyEntry] | None = None
    active_configuration: Sequence[PropertyEntry] | None = None


@dataclass(frozen=True)
class StaticProjectItem:
    properties: Sequence[PropertyEntry] | None = None


@dataclass(frozen=True)
class StaticSelectedItem:
    project: StaticProject | None = None
    project_item: StaticProjectItem | None = None


@dataclass(frozen=True)
class StaticSelection:
    solution: StaticSolution | None = None
    selected_items: Sequence[StaticSelectedItem] = field(default_factory=tuple)
