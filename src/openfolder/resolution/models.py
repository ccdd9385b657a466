"""Resolution result and error models."""

from __future__ import annotations

from pathlib import Path
from typing import NewType

from pydantic import BaseModel, ConfigDict
from result import Err

ResolvedPath = NewType("ResolvedPath", Path)


class NotFoundError(BaseModel):
    """No usable path could be resolved for the requested entity."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    context: str
    message: str


def not_found(context: str, message: str) -> Err[NotFoundError]:
    return Err(NotFoundError(context=context, message=message))
