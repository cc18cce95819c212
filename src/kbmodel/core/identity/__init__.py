"""Property identity: the key every grouped structure partitions by."""

from kbmodel.core.identity.models import PropertyId

__all__ = [
    "PropertyId",
]
