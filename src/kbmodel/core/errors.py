"""Error taxonomy shared by every kbmodel structure.

Each error also derives from the builtin exception callers would expect,
so `except ValueError` / `except IndexError` / `except LookupError` keep working.
"""


class DataModelError(Exception):
    """Base class for all kbmodel errors."""

    pass


class InvalidArgumentError(DataModelError, ValueError):
    """Raised for malformed input: wrong type, negative index, unsupported element."""

    pass


class OutOfRangeError(DataModelError, IndexError):
    """Raised when an index falls outside the bounds of the current state."""

    pass


class NotFoundError(DataModelError, LookupError):
    """Raised when a lookup by property id or by element identity finds nothing."""

    pass
