from __future__ import annotations
import heapq
from typing import Callable, Iterable, List, Mapping

from .models import RankedEntry, Selection

# Ordering strategies are plain key functions; pass another key to swap one.
SortKey = Callable[[RankedEntry], object]


class TagCountError(ValueError):
    """Requested tag count is not in 1..distinct word count."""


def by_count(e: RankedEntry) -> tuple[int, str]:
    """Count high to low; equal counts fall back to the alphabetically smaller word."""
    return (-e.count, e.word)


def alphabetical(e: RankedEntry) -> tuple[str, str]:
    """Case-insensitive word order."""
    return (e.word.lower(), e.word)


def validate_tag_count(n: int, distinct: int) -> int:
    """Return n if 1 <= n <= distinct, else raise TagCountError."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TagCountError(f"tag count must be an integer, got {n!r}")
    if n <= 0:
        raise TagCountError(f"tag count must be positive, got {n}")
    if n > distinct:
        raise TagCountError(
            f"tag count {n} exceeds the number of distinct words ({distinct})"
        )
    return n


def select_top_n(table: Mapping[str, int], n: int, *, key: SortKey = by_count) -> Selection:
    """
    Pick the n entries of `table` that come first under `key` (highest counts
    with the default key) and report the min/max count among them.

    Uses a bounded heap (heapq.nsmallest), so the whole vocabulary is never
    sorted when n is small. Entries are snapshots, not views of the table.
    """
    validate_tag_count(n, len(table))
    entries = heapq.nsmallest(
        n, (RankedEntry(word, int(count)) for word, count in table.items()), key=key
    )
    counts = [e.count for e in entries]
    return Selection(entries=tuple(entries), min_count=min(counts), max_count=max(counts))


def order_alphabetically(entries: Iterable[RankedEntry], *, key: SortKey = alphabetical) -> List[RankedEntry]:
    """Display order for the selected entries. Counts are left untouched."""
    return sorted(entries, key=key)
