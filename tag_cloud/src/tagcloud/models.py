# tagcloud/models.py
"""
Data models for the tag cloud pipeline.

- Token: one maximal run of word or separator characters.
- RankedEntry: a (word, count) snapshot taken from the frequency table.
- Selection: the N ranked entries plus the min/max count among them.
- DisplayEntry: a ranked entry with its computed font-size class.
- TagCloud: the final, display-ordered result handed to renderers.

These classes carry no business logic beyond trivial derived properties.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Token:
    """
    A maximal run of the input text.

    Attributes
    ----------
    text : str
        The run exactly as it appears in the input.
    is_word : bool
        True for a run of non-separator characters, False for a separator run.
    """
    text: str
    is_word: bool

    @property
    def normalized(self) -> str:
        """Lowercased text for words; separator runs are returned as found."""
        return self.text.lower() if self.is_word else self.text


@dataclass(frozen=True, slots=True)
class RankedEntry:
    word: str
    count: int


@dataclass(frozen=True, slots=True)
class Selection:
    """
    The N entries chosen by the top-N selector, highest count first.

    min_count / max_count are taken from these entries only, never from the
    whole vocabulary; the font scale depends on it.
    """
    entries: Tuple[RankedEntry, ...]
    min_count: int
    max_count: int

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class DisplayEntry:
    word: str
    count: int
    font_size: int   # in [FONT_MIN, FONT_MAX]


@dataclass(frozen=True, slots=True)
class TagCloud:
    """
    Result of one pipeline run, in display (alphabetical) order.

    Attributes
    ----------
    entries : Tuple[DisplayEntry, ...]
        The selected words, alphabetically ordered, with sizes.
    n : int
        Requested tag count (== len(entries)).
    min_count, max_count : int
        Count bounds of the selected entries used for scaling.
    distinct_words : int
        Number of keys in the frequency table.
    total_words : int
        Number of word tokens in the document.
    source : Optional[str]
        Label of the input (usually the file name), used in titles.
    """
    entries: Tuple[DisplayEntry, ...]
    n: int
    min_count: int
    max_count: int
    distinct_words: int
    total_words: int
    source: Optional[str] = field(default=None)

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "n": self.n,
            "min_count": self.min_count,
            "max_count": self.max_count,
            "distinct_words": self.distinct_words,
            "total_words": self.total_words,
            "entries": [
                {"word": e.word, "count": e.count, "font_size": e.font_size}
                for e in self.entries
            ],
        }
