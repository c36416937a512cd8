# tagcloud/engine.py
from __future__ import annotations

import os
import logging
from collections import Counter
from typing import AbstractSet, Optional

from . import config as CFG
from .counter import count_words
from .loader import read_document, source_label
from .models import TagCloud
from .ranking import select_top_n, order_alphabetically
from .scale import scale_entries

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - document loading (loader.read_document),
      - word counting (counter.count_words),
      - top-N selection, alphabetical ordering and font scaling.

    Public API (used by CLI/Flask/GUI):
      * build(text, ...): count words and keep the frequency table
      * load(path, ...):  read a document, then build()
      * cloud(n):         return a TagCloud for the n most frequent words
      * shutdown():       drop the table

    The table is kept so several clouds (different n) can be produced
    without recounting the document.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.table: Optional[Counter[str]] = None
        self.source: Optional[str] = None
        self._total_words = 0

    # /* ~~~ Count the words of an in-memory document ~~~ */
    def build(
        self,
        text: str,
        *,
        source: Optional[str] = None,
        separators: Optional[AbstractSet[str]] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["TAGCLOUD_VERBOSE"] = "1"

        table = count_words(text, separators if separators is not None else CFG.SEPARATORS)
        self.table = table
        self.source = source
        self._total_words = sum(table.values())
        log.info("Frequency table built: distinct=%d total=%d", len(table), self._total_words)

    # /* ~~~ Read a document from disk (or stdin) and count it ~~~ */
    def load(
        self,
        path: str,
        *,
        encoding: Optional[str] = None,
        separators: Optional[AbstractSet[str]] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        text = read_document(path, encoding=encoding)
        self.build(text, source=source_label(path), separators=separators, verbose=verbose)

    # ------------- query -------------

    @property
    def distinct_words(self) -> int:
        return len(self.table) if self.table is not None else 0

    @property
    def total_words(self) -> int:
        return self._total_words

    # /* ~~~ Select, order and scale the n most frequent words ~~~ */
    def cloud(self, n: int) -> TagCloud:
        if self.table is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        selection = select_top_n(self.table, n)
        log.info("Selected %d words: min=%d max=%d", n, selection.min_count, selection.max_count)
        ordered = order_alphabetically(selection.entries)
        entries = scale_entries(ordered, selection.min_count, selection.max_count)
        return TagCloud(
            entries=tuple(entries),
            n=n,
            min_count=selection.min_count,
            max_count=selection.max_count,
            distinct_words=self.distinct_words,
            total_words=self._total_words,
            source=self.source,
        )

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.table = None
        self.source = None
        self._total_words = 0
        log.info("Engine shutdown complete")


def build_cloud(
    text: str,
    n: int,
    *,
    separators: Optional[AbstractSet[str]] = None,
    source: Optional[str] = None,
) -> TagCloud:
    """One full pipeline run over `text`, with no state kept afterwards."""
    eng = Engine()
    eng.build(text, source=source, separators=separators)
    return eng.cloud(n)
