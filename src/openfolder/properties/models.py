"""Property bag model."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

type PropertyValue = str | bool | int | float | PropertyBag | None


class PropertyBag(Mapping[str, PropertyValue]):
    """Read-only mapping of property names to values for one host object."""

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, PropertyValue] | None = None) -> None:
        self._items = MappingProxyType(dict(items or {}))

    def __getitem__(self, key: str) -> PropertyValue:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"PropertyBag({dict(self._items)!r})"

    def first_present(self, keys: tuple[str, ...]) -> str | None:
        """Return the first of ``keys`` present in the bag."""
        return next((key for key in keys if key in self._items), None)

    def text(self, key: str) -> str:
        """Render the value stored under ``key`` as text.

        Raises:
            KeyError: if ``key`` is not in the bag.
        """
        value = self._items[key]
        if value is None:
            return ""
        if isinstance(value, bool):
            return "True" if value else "False"
        return str(value)

    def nested(self, key: str) -> PropertyBag | None:
        value = self._items.get(key)
        return value if isinstance(value, PropertyBag) else None


EMPTY_BAG = PropertyBag()
