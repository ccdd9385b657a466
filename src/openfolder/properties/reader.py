"""Read host property sources into property bags."""

from __future__ import annotations

from collections.abc import Mapping

from openfolder.common import create_logger
from openfolder.host.protocol import PropertyAccessError, PropertySource

from .models import PropertyBag, PropertyValue

logger = create_logger("properties")

# Failures a host raises for a single entry while the rest of the source stays readable.
ENTRY_READ_ERRORS: tuple[type[Exception], ...] = (PropertyAccessError, NotImplementedError, TypeError)


def read_property_bag(source: PropertySource | None) -> PropertyBag:
    """Read every entry of ``source`` into a :class:`PropertyBag`.

    Entries that cannot be read are skipped. A ``None`` source yields an empty bag.
    When a name repeats, the first readable entry wins.
    """
    if source is None:
        return PropertyBag()

    items: dict[str, PropertyValue] = {}
    skipped = 0

    for entry in source:
        if entry is None:
            continue
        try:
            name = entry.name
            value = entry.value
        except ENTRY_READ_ERRORS as exc:
            skipped += 1
            logger.trace("Skipping unreadable property", error=repr(exc))
            continue

        if name in items:
            logger.debug("Ignoring duplicate property", name=name)
            continue
        items[name] = _to_property_value(value)

    if skipped:
        logger.debug("Property source read with skipped entries", read=len(items), skipped=skipped)

    return PropertyBag(items)


def bag_from_mapping(data: Mapping[str, object] | None) -> PropertyBag:
    """Build a bag from plain data, turning nested mappings into nested bags."""
    if data is None:
        return PropertyBag()
    return PropertyBag({str(key): _to_property_value(value) for key, value in data.items()})


def _to_property_value(value: object) -> PropertyValue:
    if isinstance(value, PropertyBag):
        return value
    if isinstance(value, Mapping):
        return bag_from_mapping(value)
    return value  # type: ignore[return-value]
