"""Selected entities and their path resolution."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from result import Ok, Result

from openfolder.common import create_logger
from openfolder.host.protocol import HostProject, HostProjectItem, HostSelectedItem, HostSolution
from openfolder.properties import PropertyBag, read_property_bag

from .item import resolve_item_path
from .keys import ACTIVE_CONFIGURATION_KEY
from .models import NotFoundError, ResolvedPath, not_found
from .output import resolve_output_path
from .project import resolve_project_path
from .solution import resolve_solution_path

logger = create_logger("resolution")


@dataclass(frozen=True)
class SelectedSolution:
    solution: HostSolution


@dataclass(frozen=True)
class SelectedProject:
    project: HostProject


@dataclass(frozen=True)
class SelectedProjectItem:
    item: HostProjectItem


type SelectedEntity = SelectedSolution | SelectedProject | SelectedProjectItem


def selected_entities(items: Iterable[HostSelectedItem]) -> Iterator[SelectedEntity]:
    """Turn host selection entries into entities, skipping entries with nothing selected."""
    for item in items:
        if item.project is not None:
            yield SelectedProject(item.project)
        elif item.project_item is not None:
            yield SelectedProjectItem(item.project_item)
        else:
            logger.debug("Skipping selection entry without project or item")


def resolve_entity_path(entity: SelectedEntity) -> Result[ResolvedPath, NotFoundError]:
    match entity:
        case SelectedSolution(solution):
            return resolve_solution_path(solution.full_name)
        case SelectedProject(project):
            return resolve_project_path(read_property_bag(project.properties))
        case SelectedProjectItem(item):
            return resolve_item_path(read_property_bag(item.properties))
        case _:
            raise ValueError(f"Unexpected entity: {entity!r}")


def resolve_entity_output_path(entity: SelectedEntity) -> Result[ResolvedPath, NotFoundError]:
    """Resolve the build output of a selected project; other entities have none."""
    if not isinstance(entity, SelectedProject):
        return not_found("output", "Only projects have a build output")

    project_bag = read_property_bag(entity.project.properties)
    return active_configuration_bag(entity.project, project_bag).and_then(
        lambda config_bag: resolve_output_path(config_bag, project_bag)
    )


def active_configuration_bag(
    project: HostProject,
    project_bag: PropertyBag | None = None,
) -> Result[PropertyBag, NotFoundError]:
    """Properties of the project's active build configuration.

    Falls back to the nested bag some project types store under
    ``ActiveConfiguration`` when the host exposes no configuration directly.
    """
    if project.active_configuration is not None:
        return Ok(read_property_bag(project.active_configuration))

    if project_bag is None:
        project_bag = read_property_bag(project.properties)

    nested = project_bag.nested(ACTIVE_CONFIGURATION_KEY)
    if nested is None:
        return not_found("configuration", "Unable to find the active configuration")
    return Ok(nested)
