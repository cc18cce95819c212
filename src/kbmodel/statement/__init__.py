"""Statements and best statement selection."""

from kbmodel.statement.models import (
    PropertyNoValueSnak,
    PropertySomeValueSnak,
    PropertyValueSnak,
    Reference,
    Snak,
    Statement,
    StatementGroup,
)
from kbmodel.statement.selection import (
    BestStatementSelector,
    best_for_property,
    best_overall,
    best_per_property,
    with_rank,
)
from kbmodel.statement.statement_list import StatementList

__all__ = [
    # Models
    "Snak",
    "PropertyValueSnak",
    "PropertySomeValueSnak",
    "PropertyNoValueSnak",
    "Reference",
    "Statement",
    "StatementGroup",
    "StatementList",
    # Selection
    "BestStatementSelector",
    "best_per_property",
    "best_for_property",
    "best_overall",
    "with_rank",
]
