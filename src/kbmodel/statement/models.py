"""Statement models: snaks, references, statements, and statement groups.

Usage:
    p31 = PropertyId("P31")
    statement = Statement(PropertyValueSnak(p31, "Q5"), rank=Rank.PREFERRED)
    statement.property_id            # PropertyId("P31")

    group = StatementGroup(31)
    group.add_statement(statement)
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

from kbmodel.core.errors import InvalidArgumentError
from kbmodel.core.identity import PropertyId
from kbmodel.core.rank import LEGACY_TRUTH_RANK, Rank, assert_is_valid


def _sha1(*parts: object) -> str:
    return hashlib.sha1("|".join(str(part) for part in parts).encode()).hexdigest()


def _as_property_id(property_id: PropertyId | int) -> PropertyId:
    if isinstance(property_id, PropertyId):
        return property_id
    if isinstance(property_id, int) and not isinstance(property_id, bool):
        return PropertyId.from_number(property_id)
    raise InvalidArgumentError(
        f"Expected a PropertyId or an integer, got {type(property_id).__name__}"
    )


@dataclass(frozen=True)
class Snak:
    """Base snak: an assertion about a property.

    Equality and hashing use the stable `hash` digest.
    """

    snak_type: ClassVar[str] = ""

    property_id: PropertyId

    def __post_init__(self) -> None:
        object.__setattr__(self, "property_id", _as_property_id(self.property_id))

    @property
    def hash(self) -> str:
        """Stable SHA-1 digest of the snak's content."""
        return _sha1(self.snak_type, self.property_id)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Snak) and self.hash == other.hash

    def __hash__(self) -> int:
        return hash(self.hash)


@dataclass(frozen=True, eq=False)
class PropertyValueSnak(Snak):
    """The property has the given value."""

    snak_type: ClassVar[str] = "value"

    value: Any = None

    @property
    def hash(self) -> str:
        return _sha1(self.snak_type, self.property_id, repr(self.value))


@dataclass(frozen=True, eq=False)
class PropertySomeValueSnak(Snak):
    """The property has some unknown value."""

    snak_type: ClassVar[str] = "somevalue"


@dataclass(frozen=True, eq=False)
class PropertyNoValueSnak(Snak):
    """The property has no value."""

    snak_type: ClassVar[str] = "novalue"


@dataclass(frozen=True)
class Reference:
    """Ordered snaks backing up a statement."""

    snaks: tuple[Snak, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "snaks", _as_snak_tuple(self.snaks))

    @property
    def hash(self) -> str:
        return _sha1(*(snak.hash for snak in self.snaks))

    def is_empty(self) -> bool:
        return not self.snaks

    def __len__(self) -> int:
        return len(self.snaks)


def _as_snak_tuple(snaks: Iterable[Snak]) -> tuple[Snak, ...]:
    snaks = tuple(snaks)
    for snak in snaks:
        if not isinstance(snak, Snak):
            raise InvalidArgumentError(f"Expected Snak, got {type(snak).__name__}")
    return snaks


class Statement:
    """A main snak with qualifiers, references, an optional GUID, and a rank.

    Statements are mutable; ordered collections track them by identity.
    Equality ignores the GUID.

    Args:
        main_snak: The snak this statement is about; provides the property id.
        qualifiers: Snaks qualifying the main snak.
        references: References backing the statement.
        guid: Optional opaque identifier.
        rank: Preference tier, NORMAL by default.

    Raises:
        InvalidArgumentError: If main_snak is not a Snak or rank is not settable.
    """

    def __init__(
        self,
        main_snak: Snak,
        qualifiers: Iterable[Snak] = (),
        references: Iterable[Reference] = (),
        guid: str | None = None,
        rank: Rank = Rank.NORMAL,
    ):
        if not isinstance(main_snak, Snak):
            raise InvalidArgumentError(f"main_snak must be a Snak, got {type(main_snak).__name__}")
        self.main_snak = main_snak
        self.qualifiers = _as_snak_tuple(qualifiers)
        self.references: list[Reference] = list(references)
        self.guid = guid
        self._rank = Rank.NORMAL
        self.rank = rank

    @property
    def rank(self) -> Rank:
        return self._rank

    @rank.setter
    def rank(self, rank: Rank) -> None:
        if rank == LEGACY_TRUTH_RANK:
            raise InvalidArgumentError("The truth rank is reserved for legacy claims")
        self._rank = assert_is_valid(rank)

    @property
    def property_id(self) -> PropertyId:
        return self.main_snak.property_id

    def add_new_reference(self, *snaks: Snak) -> None:
        """Append a reference built from the given snaks."""
        self.references.append(Reference(snaks))

    def all_snaks(self) -> list[Snak]:
        """Main snak, then qualifiers, then the snaks of every reference."""
        snaks = [self.main_snak, *self.qualifiers]
        for reference in self.references:
            snaks.extend(reference.snaks)
        return snaks

    @property
    def hash(self) -> str:
        return _sha1(
            self.main_snak.hash,
            *(snak.hash for snak in self.qualifiers),
            int(self._rank),
            *(reference.hash for reference in self.references),
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Statement):
            return NotImplemented
        return (
            self.main_snak == other.main_snak
            and self.qualifiers == other.qualifiers
            and self.references == other.references
            and self._rank is other._rank
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Statement({self.main_snak!r}, rank={self._rank.name}"
            + (f", guid={self.guid!r}" if self.guid else "")
            + ")"
        )


class StatementGroup:
    """Statements sharing one property id.

    Args:
        property_id: PropertyId, or its numeric part.
    """

    def __init__(self, property_id: PropertyId | int):
        self._property_id = _as_property_id(property_id)
        self._statements: list[Statement] = []

    @property
    def property_id(self) -> PropertyId:
        return self._property_id

    def add_statements(self, statements: Iterable[Statement]) -> None:
        for statement in statements:
            self.add_statement(statement)

    def add_statement(self, statement: Statement) -> None:
        """Append a statement.

        Raises:
            InvalidArgumentError: If statement is not a Statement or has another property id.
        """
        if not isinstance(statement, Statement):
            raise InvalidArgumentError(f"Expected Statement, got {type(statement).__name__}")
        if statement.property_id != self._property_id:
            raise InvalidArgumentError(
                f"Statement must have the property id {self._property_id.serialization}"
            )
        self._statements.append(statement)

    def get_by_rank(self, rank: Rank) -> list[Statement]:
        return [statement for statement in self._statements if statement.rank == rank]

    def to_list(self) -> list[Statement]:
        return list(self._statements)

    def is_empty(self) -> bool:
        return not self._statements

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(list(self._statements))
