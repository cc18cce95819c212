"""Core capability protocols for kbmodel.

Grouped structures accept any element exposing a `property_id`; the rank-based
selection additionally needs a `rank`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from kbmodel.core.identity import PropertyId
    from kbmodel.core.rank import Rank


@runtime_checkable
class PropertyIdProvider(Protocol):
    """Anything that can be grouped by property id."""

    @property
    def property_id(self) -> PropertyId: ...


@runtime_checkable
class RankedPropertyIdProvider(PropertyIdProvider, Protocol):
    """Property id provider carrying a rank (statements)."""

    @property
    def rank(self) -> Rank: ...


E = TypeVar("E", bound=PropertyIdProvider)
"""Element type held by the grouped structures."""

S = TypeVar("S", bound=RankedPropertyIdProvider)
"""Element type consumed by the best-statement selection policies."""
