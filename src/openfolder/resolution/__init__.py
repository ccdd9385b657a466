"""Path resolution for solutions, projects, project items and build outputs."""

from .directories import first_existing_directory
from .item import resolve_item_path
from .models import NotFoundError, ResolvedPath
from .output import resolve_output_path
from .project import resolve_project_path
from .selection import (
    SelectedEntity,
    SelectedProject,
    SelectedProjectItem,
    SelectedSolution,
    active_configuration_bag,
    resolve_entity_output_path,
    resolve_entity_path,
    selected_entities,
)
from .solution import resolve_solution_path

__all__ = [
    "NotFoundError",
    "ResolvedPath",
    "SelectedEntity",
    "SelectedProject",
    "SelectedProjectItem",
    "SelectedSolution",
    "active_configuration_bag",
    "first_existing_directory",
    "resolve_entity_output_path",
    "resolve_entity_path",
    "resolve_item_path",
    "resolve_output_path",
    "resolve_project_path",
    "resolve_solution_path",
    "selected_entities",
]
