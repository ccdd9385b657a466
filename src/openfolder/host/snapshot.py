"""Selection snapshot loading.

A snapshot is a YAML rendition of what the solution explorer exposes for the
current selection. It lets the resolution core run without a live IDE.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from openfolder.common import create_logger

from .models import (
    Snapshot,
    SnapshotEntry,
    SnapshotError,
    SnapshotIOError,
    SnapshotNotFoundError,
    SnapshotValidationError,
    SnapshotYamlError,
)
from .static import (
    StaticProject,
    StaticProjectItem,
    StaticSelectedItem,
    StaticSelection,
    StaticSolution,
    static_properties,
)

logger = create_logger("host")


def load_snapshot(path: Path) -> Result[StaticSelection, SnapshotError]:
    """Load a snapshot file into host objects."""
    logger.debug("Loading snapshot", path=str(path))
    return _parse_snapshot(path).map(to_selection)


def to_selection(snapshot: Snapshot) -> StaticSelection:
    solution = StaticSolution(full_name=snapshot.solution.full_name) if snapshot.solution else None
    return StaticSelection(
        solution=solution,
        selected_items=tuple(_to_selected_item(entry) for entry in snapshot.selection),
    )


def _to_selected_item(entry: SnapshotEntry) -> StaticSelectedItem:
    if entry.project is not None:
        return StaticSelectedItem(
            project=StaticProject(
                properties=static_properties(entry.project.properties),
                active_configuration=static_properties(entry.project.active_configuration),
            )
        )
    if entry.item is not None:
        return StaticSelectedItem(project_item=StaticProjectItem(properties=static_properties(entry.item.properties)))
    return StaticSelectedItem()


def _parse_snapshot(path: Path) -> Result[Snapshot, SnapshotError]:
    if not path.exists() or not path.is_file():
        return Err(SnapshotNotFoundError(path=path, message="Snapshot file not found."))

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(SnapshotIOError(path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            SnapshotYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            )
        )

    if not isinstance(data, dict):
        return Err(
            SnapshotValidationError(
                path=path,
                field=None,
                message="Snapshot root must be a mapping of keys to values.",
            )
        )

    try:
        return Ok(Snapshot.model_validate(data))
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        return Err(SnapshotValidationError(path=path, field=field, message=message))
