"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from kbmodel import PropertyId, PropertyValueSnak, Rank, Statement


@dataclass(eq=False)
class Item:
    """Minimal property id provider; compared by identity like caller-owned elements."""

    property_id: PropertyId
    label: str

    def __repr__(self) -> str:
        return f"({self.property_id},{self.label})"


def item(number: int, label: str) -> Item:
    return Item(PropertyId.from_number(number), label)


def statement(number: int, value: str = "x", rank: Rank = Rank.NORMAL) -> Statement:
    return Statement(PropertyValueSnak(PropertyId.from_number(number), value), rank=rank)


def keys_of(elements) -> list[str]:
    return [element.property_id.serialization for element in elements]


def is_group_contiguous(elements) -> bool:
    """True if every property id forms one unbroken run."""
    seen: set[str] = set()
    previous = None
    for key in keys_of(elements):
        if key != previous:
            if key in seen:
                return False
            seen.add(key)
            previous = key
    return True


@pytest.fixture
def p1_a():
    return item(1, "a")


@pytest.fixture
def p2_c():
    return item(2, "c")


@pytest.fixture
def p1_b():
    return item(1, "b")


@pytest.fixture
def interleaved(p1_a, p2_c, p1_b):
    """[(P1,a), (P2,c), (P1,b)]: P1 split around P2."""
    return [p1_a, p2_c, p1_b]
