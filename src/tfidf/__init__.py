"""
TF-IDF relevance scoring over a growable document corpus.

Components:
- tokenizer: Whitespace + punctuation term extraction (no stemming)
- corpus: Document frequency statistics with smoothed IDF
- calculator: Aggregate TF-IDF score of a document against the corpus

Corpus growth is monotonic: documents can be added, never removed.
"""

from .tokenizer import DEFAULT_PUNCTUATION, Tokenizer, tokenize
from .corpus import CorpusSnapshot, CorpusStatistics, ReadWriteLock
from .calculator import TFIDFCalculator

__all__ = [
    "DEFAULT_PUNCTUATION",
    "Tokenizer",
    "tokenize",
    "CorpusSnapshot",
    "CorpusStatistics",
    "ReadWriteLock",
    "TFIDFCalculator",
]
