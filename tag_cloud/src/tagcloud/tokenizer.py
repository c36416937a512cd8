from __future__ import annotations
from typing import AbstractSet, Iterable, Iterator

from .config import SEPARATORS
from .models import Token


def make_separators(chars: Iterable[str]) -> frozenset[str]:
    """Build an immutable separator set from a string (or any iterable of characters)."""
    return frozenset(chars)


def _run_end(text: str, position: int, separators: AbstractSet[str]) -> int:
    """
    Index one past the maximal run starting at `position`.
    The run is all-separator or all-word, depending on text[position].
    """
    in_sep = text[position] in separators
    end = position + 1
    n = len(text)
    while end < n and (text[end] in separators) == in_sep:
        end += 1
    return end


def next_word_or_separator(text: str, position: int,
                           separators: AbstractSet[str] = SEPARATORS) -> str:
    """
    Return the first word (maximal run of characters not in `separators`) or
    separator string (maximal run of characters in `separators`) of `text`
    starting at `position`.

    Word runs are lowercased; separator runs are returned as found.
    Requires 0 <= position < len(text).

    The lowercased word can be longer than the raw run ("İ".lower() is two
    characters), so advancing by len() of the result can drift past the run.
    Use iter_tokens() to walk a whole text.
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position {position} out of range for text of length {len(text)}")
    end = _run_end(text, position, separators)
    run = text[position:end]
    if text[position] in separators:
        return run
    return run.lower()


def iter_tokens(text: str, separators: AbstractSet[str] = SEPARATORS) -> Iterator[Token]:
    """
    Yield the runs of `text` from offset 0 to the end.

    Offsets advance by the raw run length, so "".join(t.text for t in tokens)
    == text. Empty text yields nothing.
    """
    position = 0
    n = len(text)
    while position < n:
        end = _run_end(text, position, separators)
        yield Token(text=text[position:end], is_word=text[position] not in separators)
        position = end
