"""Rank scale: a stateless total order over ranks plus "no rank".

`None` (absent rank) is lower than every valid rank. Plain integers 0..2 are
accepted wherever a Rank is, and normalized to the enum member.

Usage:
    compare(Rank.NORMAL, None)                       # 1
    find_best_rank([Rank.DEPRECATED, Rank.NORMAL])   # Rank.NORMAL
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from kbmodel.core.errors import InvalidArgumentError
from kbmodel.core.rank.models import Rank


def is_valid(rank: Any) -> bool:
    """Check if a value is one of the three settable ranks.

    Booleans are rejected even though they are ints.
    """
    if isinstance(rank, bool) or not isinstance(rank, int):
        return False
    return rank in Rank._value2member_map_


def assert_is_valid(rank: Any) -> Rank:
    """Validate and normalize a rank.

    Returns:
        The matching Rank member.

    Raises:
        InvalidArgumentError: If rank is not a valid rank.
    """
    if not is_valid(rank):
        raise InvalidArgumentError(f"Invalid rank: {rank!r}")
    return Rank(rank)


def is_false(rank: Any) -> bool:
    """Statements with a deprecated rank are known to be false.

    This does not mean higher ranks are known to be true.

    Raises:
        InvalidArgumentError: If rank is not a valid rank.
    """
    return assert_is_valid(rank) is Rank.DEPRECATED


def compare(rank1: Any, rank2: Any) -> int:
    """Compare two ranks, either of which may be None.

    Returns:
        0 if equal, -1 if rank1 is less preferred, 1 if rank1 is more preferred.

    Raises:
        InvalidArgumentError: If a non-None value is not a valid rank.
    """
    first = None if rank1 is None else assert_is_valid(rank1)
    second = None if rank2 is None else assert_is_valid(rank2)

    if first == second:
        return 0
    if first is None or (second is not None and first < second):
        return -1
    return 1


def is_equal(rank1: Any, rank2: Any) -> bool:
    return compare(rank1, rank2) == 0


def is_lower(rank1: Any, rank2: Any) -> bool:
    """True if rank1 is less preferred than rank2."""
    return compare(rank1, rank2) == -1


def is_higher(rank1: Any, rank2: Any) -> bool:
    """True if rank1 is more preferred than rank2."""
    return compare(rank1, rank2) == 1


def find_best_rank(ranks: Iterable[Any]) -> Rank | None:
    """Find the most preferred rank in a sequence.

    Scanning stops as soon as PREFERRED is seen; values after it are not
    validated.

    Returns:
        Best rank, or None for an empty sequence or one containing only None.

    Raises:
        InvalidArgumentError: If a scanned value is not a valid rank or None.
    """
    best: Rank | None = None

    for rank in ranks:
        if is_higher(rank, best):
            best = Rank(rank)
            if best is Rank.PREFERRED:
                break

    return best
