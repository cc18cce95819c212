"""Property order protocol for swappable representations.

Two representations keep a sequence group-contiguous by property id:
- RebuildingPropertyOrder: flat list, fully re-grouped after every mutation
- IncrementalPropertyOrder: group order + per-group lists, mutated in place

Usage:
    order = create_property_order(statements, strategy="incremental")
    order.flat_view()
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal, Protocol

from kbmodel.core.identity import PropertyId
from kbmodel.core.types import E

OrderingStrategy = Literal["rebuilding", "incremental"]


class PropertyOrder(Protocol[E]):
    """Capabilities shared by both representations."""

    def flat_view(self) -> list[E]:
        """Current group-contiguous order."""
        ...

    def property_ids(self) -> list[PropertyId]:
        """Group order."""
        ...

    def index_of(self, element: E) -> int:
        """Position of element (by identity) in the flat view."""
        ...

    def remove_element(self, element: E) -> E:
        """Remove element (by identity) and return it."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[E]: ...
