"""Flat-list property order that re-groups itself after every mutation.

Construction is not a no-op reordering: elements of the same property that
were interleaved with other properties become contiguous.

Usage:
    order = RebuildingPropertyOrder([p1_a, p2_c, p1_b])
    order.flat_view()                # [p1_a, p1_b, p2_c]
    order.insert_at_index(p2_d, 1)   # P2 group moves so p2_d lands at a group boundary
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic

from kbmodel.core.errors import InvalidArgumentError, NotFoundError, OutOfRangeError
from kbmodel.core.grouping import GroupIndex, property_key
from kbmodel.core.identity import PropertyId
from kbmodel.core.types import E

logger = logging.getLogger(__name__)


class RebuildingPropertyOrder(Generic[E]):
    """Group-contiguous flat sequence backed by a derived GroupIndex.

    Invariant: after construction and after every mutation the flat list is
    the concatenation, in key order, of the GroupIndex computed from it.

    Args:
        elements: Possibly ungrouped sequence of property id providers.

    Raises:
        InvalidArgumentError: If an element has no property id.
    """

    def __init__(self, elements: Iterable[E] = ()):
        self._group_index: GroupIndex[E] = GroupIndex(elements)
        self._flat: list[E] = self._group_index.flatten()

    def _regroup(self) -> None:
        """Re-derive the index from the flat list and normalize the list to it."""
        self._group_index = GroupIndex(self._flat)
        self._flat = self._group_index.flatten()

    @property
    def group_index(self) -> GroupIndex[E]:
        return self._group_index

    def flat_view(self) -> list[E]:
        """Current normalized order, as a new list."""
        return list(self._flat)

    def property_ids(self) -> list[PropertyId]:
        return self._group_index.property_ids()

    def index_of(self, element: E) -> int:
        """Find an element by identity, not equality.

        Raises:
            NotFoundError: If this exact object is not in the sequence.
        """
        for index, candidate in enumerate(self._flat):
            if candidate is element:
                return index
        raise NotFoundError(f"{element!r} is not in this property order")

    def insert_at_index(self, element: E, index: int) -> None:
        """Insert element as close to index as group contiguity allows.

        If index lies inside the element's own group the element is inserted
        there. Otherwise the whole group is relocated to the first group
        boundary at or after index and the element is inserted at that
        boundary, next to its group.

        Args:
            element: Element to insert.
            index: Requested position, 0 <= index <= len.

        Raises:
            InvalidArgumentError: If index is not an int or element has no property id.
            OutOfRangeError: If index is outside 0..len.
        """
        key = property_key(element)
        self._assert_valid_index(index, len(self._flat))

        position = self._insert(element, key, index)
        self._regroup()
        logger.debug("Inserted %s element at %d (requested %d)", key, position, index)

    def remove_at_index(self, index: int) -> E:
        """Remove and return the element at index.

        Raises:
            InvalidArgumentError: If index is not an int.
            OutOfRangeError: If index is outside 0..len-1.
        """
        self._assert_valid_index(index, len(self._flat) - 1)

        element = self._flat.pop(index)
        self._regroup()
        logger.debug("Removed element at %d", index)
        return element

    def remove_element(self, element: E) -> E:
        return self.remove_at_index(self.index_of(element))

    def move_to_index(self, old_index: int, new_index: int) -> E:
        """Remove the element at old_index, then insert it at new_index.

        new_index is interpreted against the sequence after removal. Both
        indices are validated before anything changes.

        Returns:
            The moved element.
        """
        self._assert_valid_index(old_index, len(self._flat) - 1)
        self._assert_valid_index(new_index, len(self._flat) - 1)

        element = self.remove_at_index(old_index)
        self.insert_at_index(element, new_index)
        return element

    def move_element(self, element: E, index: int) -> E:
        return self.move_to_index(self.index_of(element), index)

    def _insert(self, element: E, key: str, index: int) -> int:
        """Splice element into the flat list, relocating its group if needed.

        Returns:
            Position the element was inserted at.
        """
        offsets = self._group_offsets()
        group_start = offsets.get(key, 0)
        group_count = self._group_index.group_sizes().get(key, 0)

        # New keys have an empty range, so they always snap to a boundary.
        if not group_start <= index < group_start + group_count:
            index = self._next_boundary(index, offsets)
            self._move_block(group_start, group_count, index)

        self._flat.insert(index, element)
        return index

    def _group_offsets(self) -> dict[str, int]:
        """Start offset of every group in the flat list, in key order."""
        offsets: dict[str, int] = {}
        start = 0
        for key, size in self._group_index.group_sizes().items():
            offsets[key] = start
            start += size
        return offsets

    def _next_boundary(self, index: int, offsets: dict[str, int]) -> int:
        """First group start >= index, or the end of the list."""
        for start in offsets.values():
            if start >= index:
                return start
        return len(self._flat)

    def _move_block(self, start: int, length: int, to: int) -> None:
        """Move flat[start:start+length] so it ends up right before boundary `to`."""
        if length == 0:
            return
        if start < to:
            to -= length

        block = self._flat[start : start + length]
        del self._flat[start : start + length]
        self._flat[to:to] = block

    @staticmethod
    def _assert_valid_index(index: Any, upper: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"Only integer indices are supported, got {index!r}")
        if index < 0 or index > upper:
            raise OutOfRangeError(f"Index {index} exceeds the bounds 0..{upper}")

    def __len__(self) -> int:
        return len(self._flat)

    def __iter__(self) -> Iterator[E]:
        return iter(self.flat_view())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._flat!r})"
