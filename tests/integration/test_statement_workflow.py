"""End-to-end: statements flow through ordering and selection."""

import logging

from kbmodel import (
    PropertyId,
    PropertyValueSnak,
    Rank,
    Statement,
    StatementList,
    best_per_property,
)


def test_reorder_then_select():
    p31, p569 = PropertyId("P31"), PropertyId("P569")
    human = Statement(PropertyValueSnak(p31, "Q5"))
    born = Statement(PropertyValueSnak(p569, "1952-03-11"), rank=Rank.PREFERRED)
    born_alt = Statement(PropertyValueSnak(p569, "1952-03-12"), rank=Rank.DEPRECATED)
    statements = StatementList([human, born_alt, born])

    order = statements.by_property("rebuilding")
    order.move_element(born, 0)
    assert order.flat_view() == [born, born_alt, human]

    incremental = statements.by_property("incremental")
    incremental.move_group_to_index(p31, None)
    assert incremental.flat_view() == [born_alt, born, human]

    assert best_per_property(order.flat_view()) == [born, human]
    assert statements.get_best_statements().to_list() == [born]


def test_mutations_are_logged_at_debug(caplog):
    statement = Statement(PropertyValueSnak(PropertyId("P1"), "a"))
    order = StatementList([statement]).by_property("rebuilding")

    with caplog.at_level(logging.DEBUG, logger="kbmodel"):
        order.insert_at_index(Statement(PropertyValueSnak(PropertyId("P2"), "b")), 1)

    assert any("Inserted P2 element at 1" in record.getMessage() for record in caplog.records)
