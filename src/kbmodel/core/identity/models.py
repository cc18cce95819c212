"""Property identity models.

Usage:
    pid = PropertyId("p31")        # serialization "P31"
    pid = PropertyId.from_number(31)
    pid.numeric_id                 # 31
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from kbmodel.core.errors import InvalidArgumentError

_PATTERN = re.compile(r"^p[1-9][0-9]*$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class PropertyId:
    """Identifier of a property, the key statements and snaks are grouped by.

    Compared and hashed by its canonical (uppercase) serialization.
    """

    serialization: str

    def __init__(self, serialization: str):
        if not isinstance(serialization, str):
            raise InvalidArgumentError(
                f"Property id serialization must be a string, got {type(serialization).__name__}"
            )
        if not _PATTERN.match(serialization):
            raise InvalidArgumentError(f"Invalid property id serialization: {serialization!r}")
        object.__setattr__(self, "serialization", serialization.upper())

    @classmethod
    def from_number(cls, number: int) -> PropertyId:
        """Build a property id from its numeric part.

        Raises:
            InvalidArgumentError: If number is not a positive integer.
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidArgumentError(f"Expected an integer, got {type(number).__name__}")
        return cls(f"P{number}")

    @property
    def numeric_id(self) -> int:
        return int(self.serialization[1:])

    @property
    def entity_type(self) -> str:
        return "property"

    def __str__(self) -> str:
        return self.serialization
