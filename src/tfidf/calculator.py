"""
TF-IDF calculator over a growable corpus.

Formula:
    score(doc) = sum over distinct terms t of doc: tf(t) × idf(t)

Where:
    tf(t) = c(t) / L   (c = occurrences of t in doc, L = total terms in doc)
    tf(t) = 0          when L = 0
    idf(t) = ln((1 + N) / (1 + df(t))) + 1   (see corpus.py)

The result is a single relevance scalar for the document against the corpus,
not a vector. Scoring is read-only: it never adds the scored document to the
corpus.
"""

from collections import Counter
from typing import Dict, Optional

from ..errors import require_text
from .corpus import CorpusStatistics
from .tokenizer import Tokenizer


class TFIDFCalculator:
    """
    Public entry point: add documents, score documents.

    Thread-safe: add_document() takes the corpus write lock, score() a single
    read lock hold, so a score always sees one consistent corpus state.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        """
        Initialize calculator with an empty corpus.

        Args:
            tokenizer: Tokenization policy shared by corpus and scoring
                Default: Tokenizer() (case-sensitive, DEFAULT_PUNCTUATION)
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.corpus = CorpusStatistics(self.tokenizer)

    @classmethod
    def from_settings(cls, settings) -> "TFIDFCalculator":
        """Build a calculator using tokenizer options from src.config.Settings"""
        return cls(Tokenizer(punctuation=settings.punctuation, case_fold=settings.case_fold))

    @property
    def document_count(self) -> int:
        return self.corpus.document_count

    def add_document(self, text: str) -> None:
        """
        Add a document to the corpus.

        Raises:
            InvalidArgumentError: text is None
        """
        self.corpus.add_document(text)

    def inverse_document_frequency(self, term: str) -> float:
        return self.corpus.inverse_document_frequency(term)

    def term_weights(self, document: str) -> Dict[str, float]:
        """
        Per-term TF-IDF weights of a document.

        Args:
            document: Raw document text

        Returns:
            {term: tf × idf} for each distinct term, in first-occurrence order.
            Empty dict for a document without terms.

        Raises:
            InvalidArgumentError: document is None

        Example:
            >>> calc = TFIDFCalculator()
            >>> calc.add_document("the cat sat")
            >>> calc.term_weights("the dog")
            {'the': 0.5, 'dog': 0.8465...}
        """
        require_text(document, "document")
        terms = self.tokenizer.tokenize(document)
        if not terms:
            return {}

        counts = Counter(terms)
        length = len(terms)
        idf = self.corpus.inverse_document_frequencies(counts)

        return {term: (count / length) * idf[term] for term, count in counts.items()}

    def score(self, document: str) -> float:
        """
        Aggregate TF-IDF relevance of a document against the corpus.

        Args:
            document: Raw document text

        Returns:
            Sum of per-term weights; 0.0 for an empty or all-punctuation document

        Raises:
            InvalidArgumentError: document is None

        Examples:
            >>> calc = TFIDFCalculator()
            >>> calc.score("")
            0.0
            >>> calc.score("test document")  # empty corpus: idf = 1 for every term
            1.0
        """
        weights = self.term_weights(document)
        score = 0.0
        # Counter keeps first-occurrence order, so summation order is fixed
        for weight in weights.values():
            score += weight
        return score
