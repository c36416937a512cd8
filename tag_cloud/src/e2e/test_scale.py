import pytest

from tagcloud.config import FONT_MAX, FONT_MIN
from tagcloud.models import RankedEntry
from tagcloud.scale import font_size, scale_entries


def test_bounds_and_midpoint():
    assert font_size(1, 1, 3) == 11
    assert font_size(3, 1, 3) == 48
    assert font_size(2, 1, 3) == 29


def test_degenerate_range_gives_minimum_size():
    assert font_size(5, 5, 5) == FONT_MIN
    assert font_size(1, 1, 1) == FONT_MIN


def test_monotonic_and_bounded():
    sizes = [font_size(c, 1, 100) for c in range(1, 101)]
    assert sizes == sorted(sizes)
    assert sizes[0] == FONT_MIN and sizes[-1] == FONT_MAX
    assert all(FONT_MIN <= s <= FONT_MAX for s in sizes)


def test_count_outside_selection_rejected():
    with pytest.raises(ValueError):
        font_size(10, 1, 3)


def test_scale_entries_keeps_order():
    entries = [RankedEntry("cat", 2), RankedEntry("mat", 1), RankedEntry("the", 3)]
    out = scale_entries(entries, 1, 3)
    assert [(e.word, e.count, e.font_size) for e in out] == [
        ("cat", 2, 29), ("mat", 1, 11), ("the", 3, 48),
    ]
