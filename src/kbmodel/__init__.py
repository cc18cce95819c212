"""kbmodel: property-grouped data model for knowledge-base items.

Usage:
    from kbmodel import PropertyId, PropertyValueSnak, Rank, Statement, StatementList

    p31 = PropertyId("P31")
    statements = StatementList([
        Statement(PropertyValueSnak(p31, "Q5"), rank=Rank.PREFERRED),
        Statement(PropertyValueSnak(p31, "Q215627")),
    ])
    statements.get_best_statements()

    order = statements.by_property("rebuilding")
    order.insert_at_index(new_statement, 0)
"""

import logging

__version__ = "0.1.0"

# Core primitives
from kbmodel.core import (
    LEGACY_TRUTH_RANK,
    DataModelError,
    GroupIndex,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
    PropertyId,
    PropertyIdProvider,
    Rank,
    RankedPropertyIdProvider,
    rank_scale,
)

# Ordering
from kbmodel.ordering import (
    IncrementalPropertyOrder,
    PropertyOrder,
    RebuildingPropertyOrder,
    create_property_order,
)

# Statements
from kbmodel.statement import (
    BestStatementSelector,
    PropertyNoValueSnak,
    PropertySomeValueSnak,
    PropertyValueSnak,
    Reference,
    Snak,
    Statement,
    StatementGroup,
    StatementList,
    best_overall,
    best_per_property,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "PropertyId",
    "PropertyIdProvider",
    "RankedPropertyIdProvider",
    "Rank",
    "LEGACY_TRUTH_RANK",
    "rank_scale",
    "GroupIndex",
    "DataModelError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "NotFoundError",
    # Ordering
    "PropertyOrder",
    "RebuildingPropertyOrder",
    "IncrementalPropertyOrder",
    "create_property_order",
    # Statements
    "Snak",
    "PropertyValueSnak",
    "PropertySomeValueSnak",
    "PropertyNoValueSnak",
    "Reference",
    "Statement",
    "StatementGroup",
    "StatementList",
    "BestStatementSelector",
    "best_per_property",
    "best_overall",
]
