from __future__ import annotations
from collections import Counter
from typing import AbstractSet

from .config import SEPARATORS
from .tokenizer import iter_tokens


def count_words(text: str, separators: AbstractSet[str] = SEPARATORS) -> Counter[str]:
    """
    Build the frequency table: lowercased word -> number of occurrences.
    Separator runs never become keys.
    """
    table: Counter[str] = Counter()
    for tok in iter_tokens(text, separators):
        if tok.is_word:
            table[tok.normalized] += 1
    return table
