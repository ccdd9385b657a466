"""Classify candidate paths handed out by the host."""

from __future__ import annotations

import os
import stat
from pathlib import PurePath

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def is_directory(path: str) -> bool:
    """Return whether ``path`` is a directory.

    When the filesystem cannot answer (missing, not yet built, inaccessible),
    a path ending with a separator is taken to be a directory.
    """
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return path.endswith(_SEPARATORS)


def is_rooted(path: str) -> bool:
    """Return whether ``path`` has a drive or a root; ``True`` if that cannot be determined."""
    try:
        pure = PurePath(path)
    except (OSError, ValueError):
        return True
    return bool(pure.drive or pure.root)
