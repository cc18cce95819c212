"""Split property order: group order plus one list per group.

Mutations only touch the affected list; nothing is rebuilt. Every index
accepts None to mean "append", and indices past the end clamp to the end.

Usage:
    order = IncrementalPropertyOrder([p1_a, p2_c, p1_b])
    order.move_group_to_index(PropertyId("P2"), 0)
    order.flat_view()                # [p2_c, p1_a, p1_b]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic

from kbmodel.core.errors import InvalidArgumentError, NotFoundError
from kbmodel.core.grouping import GroupIndex, property_key
from kbmodel.core.identity import PropertyId
from kbmodel.core.types import E

logger = logging.getLogger(__name__)


class IncrementalPropertyOrder(Generic[E]):
    """Group order list and per-property element lists kept in lockstep.

    Invariant: the keys with a non-empty element list are exactly the keys in
    the group order list. A property seen for the first time is appended to
    the end of the group order.

    Args:
        elements: Possibly ungrouped sequence of property id providers.
    """

    def __init__(self, elements: Iterable[E] = ()):
        group_index: GroupIndex[E] = GroupIndex(elements)

        self._property_ids: list[PropertyId] = group_index.property_ids()
        self._by_key: dict[str, list[E]] = {
            pid.serialization: group_index.get_by_property_id(pid) for pid in self._property_ids
        }

    def property_ids(self) -> list[PropertyId]:
        """Group order, as a new list."""
        return list(self._property_ids)

    def get_by_property_id(self, property_id: PropertyId) -> list[E]:
        """Elements of one group, in order.

        Raises:
            NotFoundError: If there is no group for property_id.
        """
        return list(self._group_for(property_id.serialization))

    def flat_view(self) -> list[E]:
        """Concatenate the groups in group order."""
        return [
            element for pid in self._property_ids for element in self._by_key[pid.serialization]
        ]

    def index_of(self, element: E) -> int:
        for index, candidate in enumerate(self.flat_view()):
            if candidate is element:
                return index
        raise NotFoundError(f"{element!r} is not in this property order")

    def move_group_to_index(self, property_id: PropertyId, index: int | None) -> None:
        """Move a whole group to a new position in the group order.

        Args:
            property_id: Group to move.
            index: Target position; None or past-the-end appends.

        Raises:
            InvalidArgumentError: If index is negative or not an int.
            NotFoundError: If there is no group for property_id.
        """
        self._assert_is_index(index)

        key = property_id.serialization
        old_index = self._position_of_group(key)
        moved = self._property_ids.pop(old_index)
        self._property_ids.insert(self._clamp(index, len(self._property_ids)), moved)
        logger.debug("Moved group %s from %d to %s", key, old_index, index)

    def move_element_to_index(self, element: E, index: int | None) -> None:
        """Move an element within its own group.

        Raises:
            InvalidArgumentError: If index is negative or not an int.
            NotFoundError: If the element's group, or the element itself, is missing.
        """
        self._assert_is_index(index)

        key = property_key(element)
        group = self._group_for(key)
        old_index = self._position_in_group(group, element)
        group.pop(old_index)
        group.insert(self._clamp(index, len(group)), element)
        logger.debug("Moved %s element from %d to %s within its group", key, old_index, index)

    def add_element_at_index(self, element: E, index: int | None) -> None:
        """Add an element to its group.

        A new property always starts a new group at the end of the group
        order; index only positions the element inside its group.

        Raises:
            InvalidArgumentError: If index is negative or not an int, or element has no property id.
        """
        self._assert_is_index(index)

        key = property_key(element)
        if key not in self._by_key:
            self._by_key[key] = []
            self._property_ids.append(element.property_id)
            logger.debug("Started group %s at position %d", key, len(self._property_ids) - 1)

        group = self._by_key[key]
        group.insert(self._clamp(index, len(group)), element)

    def remove_element(self, element: E) -> E:
        """Remove an element, dropping its group once the group is empty.

        Raises:
            NotFoundError: If the element's group, or the element itself, is missing.
        """
        key = property_key(element)
        group = self._group_for(key)
        group.pop(self._position_in_group(group, element))

        if not group:
            del self._by_key[key]
            del self._property_ids[self._position_of_group(key)]
            logger.debug("Dropped empty group %s", key)
        return element

    def _group_for(self, key: str) -> list[E]:
        if key not in self._by_key:
            raise NotFoundError(f"There is no group for property id {key}")
        return self._by_key[key]

    def _position_of_group(self, key: str) -> int:
        for position, pid in enumerate(self._property_ids):
            if pid.serialization == key:
                return position
        raise NotFoundError(f"There is no group for property id {key}")

    @staticmethod
    def _position_in_group(group: list[E], element: E) -> int:
        for position, candidate in enumerate(group):
            if candidate is element:
                return position
        raise NotFoundError(f"{element!r} does not exist in this property order")

    @staticmethod
    def _assert_is_index(index: Any) -> None:
        if index is None:
            return
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise InvalidArgumentError(f"Index must be a non-negative integer or None, got {index!r}")

    @staticmethod
    def _clamp(index: int | None, length: int) -> int:
        if index is None or index > length:
            return length
        return index

    def __len__(self) -> int:
        return sum(len(group) for group in self._by_key.values())

    def __iter__(self) -> Iterator[E]:
        return iter(self.flat_view())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.flat_view()!r})"
