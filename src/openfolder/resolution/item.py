"""Project item path resolution."""

from __future__ import annotations

import os
from pathlib import Path

from result import Ok, Result

from openfolder.properties import PropertyBag

from .keys import ITEM_PATH_KEY
from .models import NotFoundError, ResolvedPath, not_found


def resolve_item_path(bag: PropertyBag) -> Result[ResolvedPath, NotFoundError]:
    full_path = bag.text(ITEM_PATH_KEY) if ITEM_PATH_KEY in bag else ""
    if not full_path:
        return not_found("item", "Unable to find the project item full path")
    return Ok(ResolvedPath(Path(os.path.abspath(full_path))))
