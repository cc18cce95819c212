"""Ordered, non-unique collection of statements with filter operations.

Does no indexing of its own; grouped views are built on demand.

Usage:
    statements = StatementList([s1, s2, s3])
    statements.get_best_statements()
    order = statements.by_property("incremental")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from kbmodel.core.errors import InvalidArgumentError
from kbmodel.core.identity import PropertyId
from kbmodel.core.rank import Rank
from kbmodel.ordering import OrderingStrategy, PropertyOrder, create_property_order
from kbmodel.statement.models import Reference, Snak, Statement
from kbmodel.statement.selection import best_overall, best_per_property, with_rank


class StatementList:
    """Ordered list of Statement objects.

    Args:
        statements: Initial statements, kept in the given order.

    Raises:
        InvalidArgumentError: If an element is not a Statement.
    """

    def __init__(self, statements: Iterable[Statement] = ()):
        self._statements: list[Statement] = []
        for statement in statements:
            self.add_statement(statement)

    def add_statement(self, statement: Statement) -> None:
        if not isinstance(statement, Statement):
            raise InvalidArgumentError(
                f"Every element must be a Statement, got {type(statement).__name__}"
            )
        self._statements.append(statement)

    def add_new_statement(
        self,
        main_snak: Snak,
        qualifiers: Iterable[Snak] = (),
        references: Iterable[Reference] = (),
        guid: str | None = None,
    ) -> Statement:
        """Create a NORMAL statement, append it, and return it."""
        statement = Statement(main_snak, qualifiers, references, guid=guid)
        self.add_statement(statement)
        return statement

    def property_ids(self) -> dict[str, PropertyId]:
        """Property ids used, keyed by serialization, in first-seen order."""
        property_ids: dict[str, PropertyId] = {}
        for statement in self._statements:
            property_ids.setdefault(statement.property_id.serialization, statement.property_id)
        return property_ids

    def get_with_property_id(self, property_id: PropertyId) -> StatementList:
        return StatementList(s for s in self._statements if s.property_id == property_id)

    def get_with_rank(self, *ranks: Rank) -> StatementList:
        return StatementList(with_rank(self._statements, *ranks))

    def get_best_statements(self) -> StatementList:
        """Preferred statements if any, otherwise normal ones. Never deprecated."""
        return StatementList(best_overall(self._statements))

    def get_best_statement_per_property(self) -> StatementList:
        """Highest-ranked statements of each property. Never deprecated."""
        return StatementList(best_per_property(self._statements))

    def get_with_unique_main_snaks(self) -> StatementList:
        """Drop statements whose main snak repeats; the last occurrence wins.

        A retained statement takes the position where its main snak first appeared.
        """
        by_hash: dict[str, Statement] = {}
        for statement in self._statements:
            by_hash[statement.main_snak.hash] = statement
        return StatementList(by_hash.values())

    def main_snaks(self) -> list[Snak]:
        return [statement.main_snak for statement in self._statements]

    def all_snaks(self) -> list[Snak]:
        """Every snak of every statement: main snaks, qualifiers, reference snaks."""
        return [snak for statement in self._statements for snak in statement.all_snaks()]

    def by_property(self, strategy: OrderingStrategy | None = None) -> PropertyOrder[Statement]:
        """Group-contiguous view over these statements (not kept in sync)."""
        return create_property_order(self._statements, strategy)

    def to_list(self) -> list[Statement]:
        return list(self._statements)

    def is_empty(self) -> bool:
        return not self._statements

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(list(self._statements))

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, StatementList):
            return NotImplemented
        return self._statements == other._statements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StatementList({self._statements!r})"
