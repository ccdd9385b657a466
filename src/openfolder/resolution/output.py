"""Build output path resolution."""

from __future__ import annotations

import os
from collections.abc import Callable
from functools import partial
from pathlib import Path

from result import Ok, Result

from openfolder.common import create_logger
from openfolder.paths import is_directory, is_rooted
from openfolder.properties import PropertyBag

from .keys import OUTPUT_FILE_NAME_KEY, OUTPUT_PATH_KEYS
from .models import NotFoundError, ResolvedPath, not_found
from .project import resolve_project_path

logger = create_logger("resolution")

type ProjectPathFn = Callable[[], Result[ResolvedPath, NotFoundError]]


def resolve_output_path(
    config_bag: PropertyBag,
    project_bag: PropertyBag,
    project_path_fn: ProjectPathFn | None = None,
) -> Result[ResolvedPath, NotFoundError]:
    """Resolve the build artifact of a project's active configuration.

    Args:
        config_bag: Properties of the active build configuration.
        project_bag: Properties of the project itself.
        project_path_fn: Supplies the project file path, used to anchor a
            relative output path. Defaults to resolving it from ``project_bag``.
    """
    key = config_bag.first_present(OUTPUT_PATH_KEYS)
    if key is None:
        return not_found("output", "Unable to find the project output path")

    candidate = config_bag.text(key)
    if not candidate:
        return not_found("output", f"Output property '{key}' is empty")
    logger.debug("Output candidate found", key=key, candidate=candidate)

    if project_path_fn is None:
        project_path_fn = partial(resolve_project_path, project_bag)

    anchored = Ok(candidate) if is_rooted(candidate) else project_path_fn().map(partial(_anchor, candidate))
    return anchored.and_then(partial(_append_output_file_name, project_bag))


def _anchor(candidate: str, project_path: ResolvedPath) -> str:
    return os.path.join(project_path.parent, candidate)


def _append_output_file_name(project_bag: PropertyBag, path: str) -> Result[ResolvedPath, NotFoundError]:
    if not is_directory(path):
        return Ok(ResolvedPath(Path(os.path.abspath(path))))

    file_name = project_bag.text(OUTPUT_FILE_NAME_KEY) if OUTPUT_FILE_NAME_KEY in project_bag else ""
    if not file_name:
        return not_found("output", f"Output path '{path}' is a directory and no output file name is known")

    return Ok(ResolvedPath(Path(os.path.abspath(os.path.join(path, file_name)))))
