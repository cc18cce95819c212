"""Best statement selection policies.

Two independent policies; neither ever returns a deprecated statement:

- Per property: for each property, the statements of the highest rank seen,
  starting from NORMAL. A property with only deprecated statements yields nothing.
- Overall: all preferred statements if there are any, otherwise all normal ones.
  No grouping is involved.

Usage:
    best_per_property(statements)
    best_overall(statements)
    BestStatementSelector(statements).best_for_property(PropertyId("P31"))
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic

from kbmodel.core.grouping import GroupIndex
from kbmodel.core.identity import PropertyId
from kbmodel.core.rank import Rank, is_equal, is_higher
from kbmodel.core.types import S


def _best_of_group(statements: Iterable[S]) -> list[S]:
    best_rank = Rank.NORMAL
    best: list[S] = []

    for statement in statements:
        rank = statement.rank
        if is_equal(rank, best_rank):
            best.append(statement)
        elif is_higher(rank, best_rank):
            best = [statement]
            best_rank = Rank(rank)

    return best


class BestStatementSelector(Generic[S]):
    """Per-property best statement lookup over a fixed statement sequence.

    Args:
        statements: Ranked property id providers; never mutated.
    """

    def __init__(self, statements: Iterable[S]):
        self._group_index: GroupIndex[S] = GroupIndex(statements)

    def best_per_property(self) -> list[S]:
        """Best statements of every property, concatenated in property order."""
        best: list[S] = []
        for property_id in self._group_index.property_ids():
            best.extend(self.best_for_property(property_id))
        return best

    def best_for_property(self, property_id: PropertyId) -> list[S]:
        """Best statements for one property; empty if the property is unknown."""
        if not self._group_index.has_property_id(property_id):
            return []
        return _best_of_group(self._group_index.get_by_property_id(property_id))


def best_per_property(statements: Iterable[S]) -> list[S]:
    return BestStatementSelector(statements).best_per_property()


def best_for_property(statements: Iterable[S], property_id: PropertyId) -> list[S]:
    return BestStatementSelector(statements).best_for_property(property_id)


def with_rank(statements: Iterable[S], *ranks: Rank) -> list[S]:
    """Statements whose rank is one of the given ranks, in input order."""
    acceptable = {Rank(rank) for rank in ranks}
    return [statement for statement in statements if statement.rank in acceptable]


def best_overall(statements: Iterable[S]) -> list[S]:
    """Preferred statements if any exist, otherwise normal ones."""
    statements = list(statements)
    preferred = with_rank(statements, Rank.PREFERRED)
    if preferred:
        return preferred
    return with_rank(statements, Rank.NORMAL)
