"""Solution file path resolution."""

from __future__ import annotations

import os
from pathlib import Path

from result import Ok, Result

from .models import NotFoundError, ResolvedPath, not_found


def resolve_solution_path(raw_path: str | None) -> Result[ResolvedPath, NotFoundError]:
    """Resolve the solution file reported by the host; its directory must exist."""
    if not raw_path:
        return not_found("solution", "The solution has no path")

    try:
        solution_file = Path(os.path.abspath(raw_path))
        parent_exists = solution_file.parent.is_dir()
    except (OSError, ValueError):
        parent_exists = False

    if not parent_exists:
        return not_found("solution", f"Unable to find the directory of solution '{raw_path}'")

    return Ok(ResolvedPath(solution_file))
