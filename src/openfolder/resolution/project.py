"""Project file path resolution."""

from __future__ import annotations

import os
from pathlib import Path

from result import Ok, Result

from openfolder.paths import is_directory
from openfolder.properties import PropertyBag

from .keys import PROJECT_FILE_NAME_KEY, PROJECT_PATH_KEYS
from .models import NotFoundError, ResolvedPath, not_found


def resolve_project_path(bag: PropertyBag) -> Result[ResolvedPath, NotFoundError]:
    """Resolve the project file from the project's property bag.

    Some project types report their directory rather than the project file;
    the file name is then taken from ``FileName``.
    """
    key = bag.first_present(PROJECT_PATH_KEYS)
    if key is None:
        return not_found("project", "Unable to find the project path")

    candidate = bag.text(key)
    if not candidate:
        return not_found("project", f"Project property '{key}' is empty")

    if not is_directory(candidate):
        return Ok(ResolvedPath(Path(os.path.abspath(candidate))))

    file_name = bag.text(PROJECT_FILE_NAME_KEY) if PROJECT_FILE_NAME_KEY in bag else ""
    if not file_name:
        return not_found("project", f"Project path '{candidate}' is a directory and no file name is known")

    return Ok(ResolvedPath(Path(os.path.abspath(os.path.join(candidate, file_name)))))
