"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless building blocks (identity, ranks, grouping).
    For the stateful ordered structures, see ordering/; for statements, see statement/.
"""

from kbmodel.core.errors import (
    DataModelError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
)
from kbmodel.core.grouping import GroupIndex, property_key
from kbmodel.core.identity import PropertyId
from kbmodel.core.rank import LEGACY_TRUTH_RANK, Rank, rank_scale
from kbmodel.core.types import PropertyIdProvider, RankedPropertyIdProvider

__all__ = [
    # Errors
    "DataModelError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "NotFoundError",
    # Types
    "PropertyIdProvider",
    "RankedPropertyIdProvider",
    # Identity
    "PropertyId",
    # Rank
    "Rank",
    "LEGACY_TRUTH_RANK",
    "rank_scale",
    # Grouping
    "GroupIndex",
    "property_key",
]
