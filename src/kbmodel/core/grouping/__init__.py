"""Grouping functionality: the read-only by-property-id index."""

from kbmodel.core.grouping.core import GroupIndex, property_key

__all__ = [
    "GroupIndex",
    "property_key",
]
