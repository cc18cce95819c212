"""Statement rank models.

Higher values are more preferred:
    Rank.DEPRECATED < Rank.NORMAL < Rank.PREFERRED
"""

from __future__ import annotations

from enum import IntEnum

from kbmodel.core.errors import InvalidArgumentError

LEGACY_TRUTH_RANK = 3
"""Rank reported by legacy un-ranked claims. Never settable on a statement."""


class Rank(IntEnum):
    """Preference tier of a statement among others with the same property."""

    DEPRECATED = 0  # Known to be false
    NORMAL = 1
    PREFERRED = 2  # Cannot be exceeded

    @property
    def label(self) -> str:
        """Lowercase name, e.g. "preferred"."""
        return self.name.lower()

    @classmethod
    def names(cls) -> dict[Rank, str]:
        """Map every rank to its lowercase name."""
        return {rank: rank.label for rank in cls}

    @classmethod
    def from_name(cls, name: str) -> Rank:
        """Look up a rank by its lowercase name.

        Raises:
            InvalidArgumentError: If name is not a known rank name.
        """
        for rank in cls:
            if rank.label == name:
                return rank
        raise InvalidArgumentError(f"Unknown rank name: {name!r}")
