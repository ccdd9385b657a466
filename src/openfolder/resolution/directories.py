"""Existing-directory lookup for seeding shells."""

from __future__ import annotations

import os
from pathlib import Path

from result import Ok, Result

from .models import NotFoundError, ResolvedPath, not_found


def first_existing_directory(path: Path | str) -> Result[ResolvedPath, NotFoundError]:
    """Return ``path`` or its nearest ancestor that exists as a directory.

    A target that is not built yet still yields a directory a shell can start in.
    """
    start = Path(os.path.abspath(path))
    for candidate in (start, *start.parents):
        try:
            if candidate.is_dir():
                return Ok(ResolvedPath(candidate))
        except OSError:
            continue
    return not_found("directory", f"No existing directory found above '{start}'")
