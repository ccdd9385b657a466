"""Filesystem path helpers."""

from .classifier import is_directory, is_rooted

__all__ = [
    "is_directory",
    "is_rooted",
]
