"""
Corpus statistics store - document frequencies across all added documents.

Smoothed IDF:
    idf(t) = ln((1 + N) / (1 + df(t))) + 1

Where:
    N = number of documents added so far
    df(t) = number of added documents containing t at least once

The +1 terms keep idf finite and positive for unseen terms and for an
empty corpus (N = 0, df = 0 gives idf = 1.0).
"""

import logging
import math
import threading
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from ..errors import require_text
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Readers/writer lock: many readers or one writer.

    Writers are preferred: once a writer is waiting, new readers block until
    it has finished, so a stream of score() calls cannot starve add_document().
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass(frozen=True)
class CorpusSnapshot:
    """Consistent copy of corpus state"""
    document_count: int
    document_frequencies: Dict[str, int] = field(default_factory=dict)


class CorpusStatistics:
    """
    Growable corpus statistics.

    add_document() is the only mutator; there is no removal. All reads and
    writes go through a ReadWriteLock so document_count and the frequency
    map are always observed together.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()
        self._document_count = 0
        self._document_frequencies: Dict[str, int] = defaultdict(int)
        self._lock = ReadWriteLock()

    def add_document(self, text: str) -> None:
        """
        Add one document to the corpus.

        Args:
            text: Raw document text (empty string is a valid, term-less document)

        Raises:
            InvalidArgumentError: text is None
        """
        require_text(text)
        # Tokenize outside the lock, only the counter updates need exclusion
        distinct_terms = set(self.tokenizer.tokenize(text))

        with self._lock.write_locked():
            for term in distinct_terms:
                self._document_frequencies[term] += 1
            self._document_count += 1
            count = self._document_count

        logger.debug(f"Corpus document #{count} added: {len(distinct_terms)} distinct terms")

    @property
    def document_count(self) -> int:
        with self._lock.read_locked():
            return self._document_count

    @property
    def vocabulary_size(self) -> int:
        """Number of distinct terms seen across the corpus"""
        with self._lock.read_locked():
            return len(self._document_frequencies)

    def document_frequency(self, term: str) -> int:
        with self._lock.read_locked():
            # .get() so lookups never insert zero entries into the defaultdict
            return self._document_frequencies.get(term, 0)

    def inverse_document_frequency(self, term: str) -> float:
        """Smoothed IDF of a single term (see module docstring)"""
        with self._lock.read_locked():
            return self._idf(term)

    def inverse_document_frequencies(self, terms: Iterable[str]) -> Dict[str, float]:
        """
        IDF for several terms, all computed from one consistent corpus state.

        Args:
            terms: Terms to look up (duplicates are fine)

        Returns:
            {term: idf}, in first-seen order of terms
        """
        with self._lock.read_locked():
            return {term: self._idf(term) for term in terms}

    def snapshot(self) -> CorpusSnapshot:
        with self._lock.read_locked():
            return CorpusSnapshot(
                document_count=self._document_count,
                document_frequencies=dict(self._document_frequencies),
            )

    def _idf(self, term: str) -> float:
        # Caller holds the read lock
        df = self._document_frequencies.get(term, 0)
        return math.log((1 + self._document_count) / (1 + df)) + 1
