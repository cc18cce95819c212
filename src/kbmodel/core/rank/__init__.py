"""Rank functionality: the rank enum and the stateless rank scale."""

from kbmodel.core.rank import operations as rank_scale
from kbmodel.core.rank.models import LEGACY_TRUTH_RANK, Rank
from kbmodel.core.rank.operations import (
    assert_is_valid,
    compare,
    find_best_rank,
    is_equal,
    is_false,
    is_higher,
    is_lower,
    is_valid,
)

__all__ = [
    "Rank",
    "LEGACY_TRUTH_RANK",
    "rank_scale",
    "is_valid",
    "assert_is_valid",
    "is_false",
    "compare",
    "is_equal",
    "is_lower",
    "is_higher",
    "find_best_rank",
]
