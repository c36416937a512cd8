from __future__ import annotations
from typing import Iterable, List

from .config import FONT_MIN, FONT_MAX
from .models import DisplayEntry, RankedEntry


def font_size(count: int, min_count: int, max_count: int) -> int:
    """
    Map a count linearly onto the font-size classes [FONT_MIN, FONT_MAX]:

        floor((FONT_MAX - FONT_MIN) * (count - min) / (max - min)) + FONT_MIN

    When every selected word shares one count (max == min) the result is
    FONT_MIN.
    """
    if max_count == min_count:
        return FONT_MIN
    if not min_count <= count <= max_count:
        raise ValueError(f"count {count} outside [{min_count}, {max_count}]")
    span = FONT_MAX - FONT_MIN
    return span * (count - min_count) // (max_count - min_count) + FONT_MIN


def scale_entries(entries: Iterable[RankedEntry], min_count: int, max_count: int) -> List[DisplayEntry]:
    """Attach a font size to each entry, keeping the input order."""
    return [
        DisplayEntry(word=e.word, count=e.count, font_size=font_size(e.count, min_count, max_count))
        for e in entries
    ]
