"""Read-only grouping of elements by property id.

GroupIndex is rebuilt, never patched: callers needing a fresh grouping
construct a new one from the current flat sequence.

Usage:
    index = GroupIndex.build(statements)
    for pid in index.property_ids():
        group = index.get_by_property_id(pid)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic

from kbmodel.core.errors import InvalidArgumentError, NotFoundError
from kbmodel.core.identity import PropertyId
from kbmodel.core.types import E, PropertyIdProvider


def property_key(element: Any) -> str:
    """Get the grouping key (property id serialization) of an element.

    Raises:
        InvalidArgumentError: If element cannot supply a PropertyId.
    """
    if not isinstance(element, PropertyIdProvider):
        raise InvalidArgumentError(
            f"{type(element).__name__} does not provide a property id"
        )
    property_id = element.property_id
    if not isinstance(property_id, PropertyId):
        raise InvalidArgumentError(
            f"{type(element).__name__}.property_id must be a PropertyId, "
            f"got {type(property_id).__name__}"
        )
    return property_id.serialization


class GroupIndex(Generic[E]):
    """Mapping of property id serialization to the elements carrying it.

    Key order is first-seen order across the input. Within a group, input
    order is preserved. Every input element lands in exactly one group.

    Args:
        elements: Flat sequence of property id providers.

    Raises:
        InvalidArgumentError: If elements is not iterable or an element has no property id.
    """

    def __init__(self, elements: Iterable[E]):
        if isinstance(elements, (str, bytes)) or not isinstance(elements, Iterable):
            raise InvalidArgumentError(
                f"Expected an iterable of elements, got {type(elements).__name__}"
            )

        self._by_key: dict[str, list[E]] = {}
        self._property_ids: dict[str, PropertyId] = {}

        for element in elements:
            key = property_key(element)
            if key in self._by_key:
                self._by_key[key].append(element)
            else:
                self._by_key[key] = [element]
                self._property_ids[key] = element.property_id

    @classmethod
    def build(cls, elements: Iterable[E]) -> GroupIndex[E]:
        """Alternate constructor reading as a pure function of its input."""
        return cls(elements)

    def property_ids(self) -> list[PropertyId]:
        """All property ids found, in first-seen order."""
        return list(self._property_ids.values())

    def keys(self) -> list[str]:
        """Property id serializations, in first-seen order."""
        return list(self._by_key)

    def get_by_property_id(self, property_id: PropertyId) -> list[E]:
        """Get the elements of one group, in input order.

        Returns:
            A new list; mutating it does not affect the index.

        Raises:
            NotFoundError: If no element has this property id.
        """
        key = property_id.serialization
        if key not in self._by_key:
            raise NotFoundError(f"No group for property id {key}")
        return list(self._by_key[key])

    def has_property_id(self, property_id: PropertyId) -> bool:
        return property_id.serialization in self._by_key

    def group_sizes(self) -> dict[str, int]:
        """Number of elements per key, in key order."""
        return {key: len(group) for key, group in self._by_key.items()}

    def flatten(self) -> list[E]:
        """Concatenate every group in key order (group-contiguous)."""
        return [element for group in self._by_key.values() for element in group]

    def __len__(self) -> int:
        return len(self._by_key)

    def __iter__(self) -> Iterator[PropertyId]:
        return iter(self.property_ids())

    def __contains__(self, property_id: object) -> bool:
        return isinstance(property_id, PropertyId) and self.has_property_id(property_id)
