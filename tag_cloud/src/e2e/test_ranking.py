import pytest

from tagcloud.models import RankedEntry
from tagcloud.ranking import (TagCountError, alphabetical, by_count, order_alphabetically,
                              select_top_n, validate_tag_count)

TABLE = {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


def test_top3_uses_alphabetical_tie_break():
    sel = select_top_n(TABLE, 3)
    assert [(e.word, e.count) for e in sel.entries] == [("the", 3), ("cat", 2), ("mat", 1)]
    assert (sel.min_count, sel.max_count) == (1, 3)
    assert len(sel) == 3


def test_tie_break_independent_of_insertion_order():
    reordered = dict(reversed(list(TABLE.items())))
    assert select_top_n(reordered, 4) == select_top_n(TABLE, 4)


def test_n_equal_to_vocabulary_returns_every_word_once():
    sel = select_top_n(TABLE, len(TABLE))
    got = {e.word: e.count for e in sel.entries}
    assert got == TABLE
    assert len(sel.entries) == len(TABLE)


@pytest.mark.parametrize("n", [0, -1, 7, 100])
def test_invalid_n_rejected(n):
    with pytest.raises(TagCountError):
        select_top_n(TABLE, n)


def test_empty_table_rejects_any_n():
    with pytest.raises(TagCountError):
        select_top_n({}, 1)


def test_tag_count_error_is_value_error():
    assert issubclass(TagCountError, ValueError)


@pytest.mark.parametrize("bad", ["3", 2.0, True, None])
def test_validate_rejects_non_integers(bad):
    with pytest.raises(TagCountError):
        validate_tag_count(bad, 5)


def test_min_max_come_from_selection_only():
    table = {"a": 10, "b": 7, "c": 5, "d": 1}
    sel = select_top_n(table, 2)
    assert (sel.min_count, sel.max_count) == (7, 10)


def test_entries_are_snapshots():
    table = dict(TABLE)
    sel = select_top_n(table, 1)
    table["the"] = 99
    assert sel.entries[0] == RankedEntry("the", 3)


def test_order_strategy_is_swappable():
    table = {"a": 5, "b": 1, "c": 2}
    sel = select_top_n(table, 2, key=lambda e: (e.count, e.word))
    assert [e.word for e in sel.entries] == ["b", "c"]
    assert by_count(RankedEntry("x", 4)) < by_count(RankedEntry("y", 2))


def test_alphabetical_order_is_case_insensitive():
    entries = [RankedEntry("gamma", 3), RankedEntry("Beta", 1), RankedEntry("alpha", 2)]
    assert [e.word for e in order_alphabetically(entries)] == ["alpha", "Beta", "gamma"]
    assert alphabetical(RankedEntry("Beta", 1)) < alphabetical(RankedEntry("gamma", 1))


def test_alphabetical_order_keeps_counts():
    sel = select_top_n(TABLE, 3)
    ordered = order_alphabetically(sel.entries)
    assert [(e.word, e.count) for e in ordered] == [("cat", 2), ("mat", 1), ("the", 3)]
    assert (sel.min_count, sel.max_count) == (1, 3)
