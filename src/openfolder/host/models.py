"""Pydantic models for selection snapshots and their load errors."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SnapshotSolution(BaseModel):
    model_config = ConfigDict(extra="forbid")

    full_name: str


class SnapshotProject(BaseModel):
    model_config = ConfigDict(extra="forbid")

    properties: dict[str, Any] = Field(default_factory=dict)
    active_configuration: dict[str, Any] | None = None


class SnapshotItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    properties: dict[str, Any] = Field(default_factory=dict)


class SnapshotEntry(BaseModel):
    """One selected entry; an empty entry stands for a selection with nothing usable."""

    model_config = ConfigDict(extra="forbid")

    project: SnapshotProject | None = None
    item: SnapshotItem | None = None

    @model_validator(mode="after")
    def _validate_single_target(self) -> SnapshotEntry:
        if self.project is not None and self.item is not None:
            raise ValueError("A selection entry holds either a project or an item, not both.")
        return self


class Snapshot(BaseModel):
    """Selection state of the solution explorer (snapshot.yaml)."""

    model_config = ConfigDict(extra="forbid")

    solution: SnapshotSolution | None = None
    selection: list[SnapshotEntry] = Field(default_factory=list)


class SnapshotNotFoundError(BaseModel):
    """Snapshot file not found."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class SnapshotIOError(BaseModel):
    """File I/O error reading a snapshot."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class SnapshotYamlError(BaseModel):
    """YAML parsing error in a snapshot file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class SnapshotValidationError(BaseModel):
    """Schema validation error in a snapshot file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


type SnapshotError = SnapshotNotFoundError | SnapshotIOError | SnapshotYamlError | SnapshotValidationError
