"""Group-contiguous property orders."""

from __future__ import annotations

from collections.abc import Iterable

from kbmodel.core.errors import InvalidArgumentError
from kbmodel.core.types import E
from kbmodel.ordering.incremental import IncrementalPropertyOrder
from kbmodel.ordering.protocol import OrderingStrategy, PropertyOrder
from kbmodel.ordering.rebuilding import RebuildingPropertyOrder


def create_property_order(
    elements: Iterable[E], strategy: OrderingStrategy | None = None
) -> PropertyOrder[E]:
    """Build a property order using the requested representation.

    Args:
        elements: Possibly ungrouped sequence of property id providers.
        strategy: "rebuilding" or "incremental". When None, the default comes
            from OrderingSettings (requires kbmodel[config]).

    Raises:
        InvalidArgumentError: If strategy is unknown.
    """
    if strategy is None:
        from kbmodel.config import OrderingSettings

        strategy = OrderingSettings().default_strategy

    if strategy == "rebuilding":
        return RebuildingPropertyOrder(elements)
    elif strategy == "incremental":
        return IncrementalPropertyOrder(elements)
    else:
        raise InvalidArgumentError(f"Unknown ordering strategy: {strategy}")


__all__ = [
    "PropertyOrder",
    "OrderingStrategy",
    "RebuildingPropertyOrder",
    "IncrementalPropertyOrder",
    "create_property_order",
]
