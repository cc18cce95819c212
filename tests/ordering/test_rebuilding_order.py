"""Tests for RebuildingPropertyOrder.

Critical Invariants:
- The flat view is group-contiguous after construction and every mutation
- Lookups are by identity, not equality
- Failed operations leave the order unchanged
"""

import pytest
from conftest import Item, is_group_contiguous, item, keys_of
from hypothesis import given
from hypothesis import strategies as st

from kbmodel.core.errors import InvalidArgumentError, NotFoundError, OutOfRangeError
from kbmodel.core.identity import PropertyId
from kbmodel.ordering import RebuildingPropertyOrder


@st.composite
def items_strategy(draw, min_size=0):
    """Random element sequences over a few property ids."""
    numbers = draw(st.lists(st.integers(min_value=1, max_value=4), min_size=min_size, max_size=12))
    return [item(number, str(position)) for position, number in enumerate(numbers)]


def labels(order):
    return [element.label for element in order.flat_view()]


@pytest.fixture
def order():
    """[P1 a, P1 b, P2 c, P2 d, P3 e] built from an interleaved input."""
    return RebuildingPropertyOrder(
        [item(1, "a"), item(2, "c"), item(1, "b"), item(3, "e"), item(2, "d")]
    )


# Construction


def test_construction_groups_interleaved_elements(interleaved, p1_a, p1_b, p2_c):
    """P1 appeared first, so its run comes first and absorbs (P1,b)."""
    order = RebuildingPropertyOrder(interleaved)

    assert order.flat_view() == [p1_a, p1_b, p2_c]
    assert order.property_ids() == [PropertyId("P1"), PropertyId("P2")]


def test_fixture_order(order):
    assert labels(order) == ["a", "b", "c", "d", "e"]
    assert len(order) == 5
    assert [e.label for e in order] == ["a", "b", "c", "d", "e"]


def test_flat_view_is_a_copy(order):
    order.flat_view().clear()
    assert len(order) == 5


@given(items_strategy())
def test_flat_view_is_always_group_contiguous(elements):
    """PROPERTY: construction normalizes any input to contiguous runs."""
    order = RebuildingPropertyOrder(elements)
    assert is_group_contiguous(order.flat_view())
    assert sorted(map(id, order.flat_view())) == sorted(map(id, elements))


@given(items_strategy())
def test_normalization_is_idempotent(elements):
    """PROPERTY: rebuilding from a flat view reproduces it."""
    once = RebuildingPropertyOrder(elements).flat_view()
    twice = RebuildingPropertyOrder(once).flat_view()
    assert once == twice


def test_rejects_elements_without_property_id():
    with pytest.raises(InvalidArgumentError):
        RebuildingPropertyOrder([object()])


# index_of


def test_index_of_uses_identity(order):
    first = order.flat_view()[0]
    twin = Item(first.property_id, first.label)

    assert order.index_of(first) == 0
    with pytest.raises(NotFoundError):
        order.index_of(twin)


# insert_at_index


def test_insert_inside_own_group_stays_in_place(order):
    order.insert_at_index(item(2, "x"), 3)
    assert labels(order) == ["a", "b", "c", "x", "d", "e"]


def test_insert_at_own_group_start(order):
    order.insert_at_index(item(2, "x"), 2)
    assert labels(order) == ["a", "b", "x", "c", "d", "e"]


def test_insert_at_end_of_own_group_appends_to_group(order):
    """Index right after the group snaps to the next boundary, i.e. the group end."""
    order.insert_at_index(item(1, "x"), 2)
    assert labels(order) == ["a", "b", "x", "c", "d", "e"]


def test_insert_before_group_moves_group_forward(order):
    """P3 moves to the boundary at 0 and the new element lands before it."""
    order.insert_at_index(item(3, "x"), 0)
    assert labels(order) == ["x", "e", "a", "b", "c", "d"]
    assert order.property_ids()[0] == PropertyId("P3")


def test_insert_inside_other_group_snaps_to_next_boundary(order):
    """Index 1 is inside P1; P3 relocates to the P2 boundary at 2."""
    order.insert_at_index(item(3, "x"), 1)
    assert labels(order) == ["a", "b", "x", "e", "c", "d"]


def test_insert_after_group_moves_group_back(order):
    """P1 block precedes the end boundary, so it moves to the end and the element follows it."""
    order.insert_at_index(item(1, "x"), 5)
    assert labels(order) == ["c", "d", "e", "a", "b", "x"]


def test_insert_new_key_at_front(order):
    order.insert_at_index(item(9, "x"), 0)
    assert labels(order) == ["x", "a", "b", "c", "d", "e"]


def test_insert_new_key_inside_group_snaps_to_boundary(order):
    order.insert_at_index(item(9, "x"), 3)
    assert labels(order) == ["a", "b", "c", "d", "x", "e"]


def test_insert_new_key_at_end(order):
    order.insert_at_index(item(9, "x"), 5)
    assert labels(order) == ["a", "b", "c", "d", "e", "x"]


def test_insert_into_empty_order():
    order = RebuildingPropertyOrder([])
    element = item(1, "x")
    order.insert_at_index(element, 0)
    assert order.flat_view() == [element]


@pytest.mark.parametrize("index", [-1, 6, 100])
def test_insert_out_of_range(order, index):
    before = order.flat_view()
    with pytest.raises(OutOfRangeError):
        order.insert_at_index(item(1, "x"), index)
    assert order.flat_view() == before


@pytest.mark.parametrize("index", [None, 1.0, "1", True])
def test_insert_non_integer_index(order, index):
    before = order.flat_view()
    with pytest.raises(InvalidArgumentError, match="integer"):
        order.insert_at_index(item(1, "x"), index)
    assert order.flat_view() == before


def test_insert_rejects_element_without_property_id(order):
    before = order.flat_view()
    with pytest.raises(InvalidArgumentError):
        order.insert_at_index(object(), 0)
    assert order.flat_view() == before


@given(items_strategy(), st.integers(min_value=1, max_value=5), st.data())
def test_insert_keeps_contiguity(elements, number, data):
    """PROPERTY: any valid insert keeps every run unbroken."""
    order = RebuildingPropertyOrder(elements)
    index = data.draw(st.integers(min_value=0, max_value=len(order)))
    new = item(number, "new")

    order.insert_at_index(new, index)

    flat = order.flat_view()
    assert is_group_contiguous(flat)
    assert len(flat) == len(elements) + 1
    assert flat[order.index_of(new)] is new


@given(items_strategy(), st.integers(min_value=1, max_value=4), st.data())
def test_insert_inside_group_lands_exactly(elements, number, data):
    """PROPERTY: an index strictly inside the element's own group is honoured."""
    order = RebuildingPropertyOrder(elements)
    key = f"P{number}"
    positions = [i for i, k in enumerate(keys_of(order.flat_view())) if k == key]
    if not positions:
        return
    index = data.draw(st.sampled_from(positions))
    new = item(number, "new")

    order.insert_at_index(new, index)

    assert order.index_of(new) == index


# remove


def test_remove_at_index_returns_element(order):
    element = order.flat_view()[2]

    assert order.remove_at_index(2) is element
    assert labels(order) == ["a", "b", "d", "e"]


def test_remove_last_of_group_drops_group(order):
    order.remove_at_index(4)
    assert order.property_ids() == [PropertyId("P1"), PropertyId("P2")]


def test_remove_at_length_is_out_of_range(order):
    with pytest.raises(OutOfRangeError):
        order.remove_at_index(len(order))
    assert len(order) == 5


def test_remove_from_empty_order():
    with pytest.raises(OutOfRangeError):
        RebuildingPropertyOrder([]).remove_at_index(0)


def test_remove_element(order):
    element = order.flat_view()[1]
    assert order.remove_element(element) is element
    assert labels(order) == ["a", "c", "d", "e"]


def test_remove_missing_element(order):
    with pytest.raises(NotFoundError):
        order.remove_element(item(1, "a"))


# move


def test_move_within_group(order):
    moved = order.move_to_index(0, 1)
    assert moved.label == "a"
    assert labels(order) == ["b", "a", "c", "d", "e"]


def test_move_index_is_relative_to_post_removal_sequence(order):
    """After removing 'a' the sequence is [b, c, d, e]; index 4 is its end."""
    order.move_to_index(0, 4)
    assert labels(order) == ["c", "d", "e", "b", "a"]


def test_move_to_other_group_relocates_own_group(order):
    """'e' (P3) moved to 0 takes its group to the front."""
    order.move_to_index(4, 0)
    assert labels(order) == ["e", "a", "b", "c", "d"]


def test_move_element(order):
    element = order.flat_view()[3]
    assert order.move_element(element, 2) is element
    assert labels(order) == ["a", "b", "d", "c", "e"]


@pytest.mark.parametrize(("old", "new"), [(5, 0), (-1, 0), (0, 5), (0, -1)])
def test_move_out_of_range_changes_nothing(order, old, new):
    before = order.flat_view()
    with pytest.raises(OutOfRangeError):
        order.move_to_index(old, new)
    assert order.flat_view() == before


@given(items_strategy(min_size=1), st.data())
def test_move_keeps_contiguity(elements, data):
    """PROPERTY: any valid move keeps every run unbroken and loses nothing."""
    order = RebuildingPropertyOrder(elements)
    old = data.draw(st.integers(min_value=0, max_value=len(order) - 1))
    new = data.draw(st.integers(min_value=0, max_value=len(order) - 1))

    moved = order.move_to_index(old, new)

    assert is_group_contiguous(order.flat_view())
    assert len(order) == len(elements)
    assert order.index_of(moved) >= 0


def test_group_index_tracks_mutations(order):
    order.insert_at_index(item(9, "x"), 0)
    assert order.group_index.has_property_id(PropertyId("P9"))
    assert order.group_index.group_sizes()["P9"] == 1
