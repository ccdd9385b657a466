"""Host property bags."""

from .models import EMPTY_BAG, PropertyBag, PropertyValue
from .reader import bag_from_mapping, read_property_bag

__all__ = [
    "EMPTY_BAG",
    "PropertyBag",
    "PropertyValue",
    "bag_from_mapping",
    "read_property_bag",
]
