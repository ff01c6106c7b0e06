"""
Unit tests for TFIDFCalculator scoring.
"""

import math
import threading

import pytest

from src.config import Settings
from src.errors import InvalidArgumentError
from src.tfidf import TFIDFCalculator, Tokenizer

pytestmark = pytest.mark.unit

ANIMAL_CORPUS = [
    "the cat sat on the mat",
    "the dog sat on the log",
    "cats and dogs are animals",
]


@pytest.fixture
def calculator():
    calc = TFIDFCalculator()
    for document in ANIMAL_CORPUS:
        calc.add_document(document)
    return calc


def idf(n, df):
    return math.log((1 + n) / (1 + df)) + 1


class TestTFIDFCalculator:
    """Test scoring scenarios"""

    def test_known_document_matches_manual_calculation(self, calculator):
        """Test score against tf × idf computed by hand"""
        # the: tf 2/6 df 2 | cat: 1/6 df 1 | sat: 1/6 df 2 | on: 1/6 df 2 | mat: 1/6 df 1
        expected = (
            2 / 6 * idf(3, 2)
            + 1 / 6 * idf(3, 1)
            + 1 / 6 * idf(3, 2)
            + 1 / 6 * idf(3, 2)
            + 1 / 6 * idf(3, 1)
        )
        score = calculator.score("the cat sat on the mat")

        assert score == pytest.approx(expected)
        assert score == pytest.approx(1.4228, abs=0.001)
        assert math.isfinite(score)

    def test_unknown_words_get_maximum_idf(self, calculator):
        """Test unseen terms still score: every idf is ln(1 + N) + 1"""
        score = calculator.score("zzzz yyyy")

        assert score == pytest.approx(math.log(4) + 1)
        assert math.isfinite(score)
        assert score > 0

    def test_unknown_words_bound_every_score(self, calculator):
        """Test length-normalised tf makes the score a weighted average of idf values"""
        ceiling = calculator.score("zzzz yyyy")
        for document in ANIMAL_CORPUS + ["cat", "animals dogs", "the the the"]:
            assert calculator.score(document) <= ceiling

    def test_empty_document(self, calculator):
        assert calculator.score("") == 0.0
        assert TFIDFCalculator().score("") == 0.0

    def test_all_punctuation_document(self, calculator):
        """Test a document that tokenizes to nothing scores 0.0, not NaN"""
        assert calculator.score("!@#$%^&*()") == 0.0

    def test_none_document_raises(self, calculator):
        with pytest.raises(InvalidArgumentError):
            calculator.score(None)

    def test_none_corpus_document_raises(self, calculator):
        with pytest.raises(InvalidArgumentError):
            calculator.add_document(None)
        assert calculator.document_count == 3

    def test_empty_corpus(self):
        """Test scoring with no documents: every idf is 1, score is 1.0"""
        calc = TFIDFCalculator()
        score = calc.score("test document")

        assert score == pytest.approx(1.0)
        assert math.isfinite(score)

    def test_single_word(self, calculator):
        """Test single-term document: tf is 1, score equals idf"""
        assert calculator.score("cat") == pytest.approx(idf(3, 1))

    def test_arabic_text(self):
        calc = TFIDFCalculator()
        calc.add_document("مرحبا بك في المحرر")
        calc.add_document("النص العربي جميل")

        score = calc.score("مرحبا بك في المحرر")

        assert score == pytest.approx(idf(2, 1))
        assert not math.isnan(score)

    def test_identical_inputs_identical_scores(self):
        """Test bit-for-bit reproducibility"""
        calc = TFIDFCalculator()
        for _ in range(3):
            calc.add_document("same text same text")

        assert calc.score("same text same text") == calc.score("same text same text")

    def test_score_does_not_mutate_corpus(self, calculator):
        before = calculator.corpus.snapshot()
        calculator.score("brand new words here")
        calculator.score("")
        assert calculator.corpus.snapshot() == before

    def test_empty_document_counts_toward_denominator(self):
        """Test empty documents raise N and therefore idf of unseen terms"""
        calc = TFIDFCalculator()
        calc.add_document("alpha")
        before = calc.score("beta")
        calc.add_document("")
        after = calc.score("beta")

        assert calc.document_count == 2
        assert after == pytest.approx(idf(2, 0))
        assert after > before

    def test_term_weights_sum_to_score(self, calculator):
        weights = calculator.term_weights("the cat sat on the mat")

        assert list(weights) == ["the", "cat", "sat", "on", "mat"]
        assert weights["the"] == pytest.approx(2 / 6 * idf(3, 2))
        assert sum(weights.values()) == pytest.approx(calculator.score("the cat sat on the mat"))

    def test_term_weights_empty(self, calculator):
        assert calculator.term_weights("") == {}
        with pytest.raises(InvalidArgumentError):
            calculator.term_weights(None)


class TestCasePolicy:
    """Test the case-sensitive default and the case-folding option"""

    def test_case_sensitive_by_default(self):
        """Test "Test" and "test" are different terms"""
        calc = TFIDFCalculator()
        calc.add_document("This is a test")

        assert calc.score("This is a test") != calc.score("This is a Test")
        assert calc.score("This is a Test") > calc.score("This is a test")

    def test_case_fold_makes_scores_equal(self):
        calc = TFIDFCalculator(Tokenizer(case_fold=True))
        calc.add_document("This is a test")

        assert calc.score("This is a test") == calc.score("This is a Test")

    def test_from_settings(self):
        calc = TFIDFCalculator.from_settings(Settings(case_fold=True, punctuation=","))

        assert calc.tokenizer.case_fold is True
        assert calc.tokenizer.punctuation == ","
        assert calc.corpus.tokenizer is calc.tokenizer


class TestConcurrentScoring:
    """Test add_document and score from several threads"""

    def test_parallel_add_and_score(self):
        calc = TFIDFCalculator()
        scores = []
        errors = []

        def writer():
            for i in range(100):
                calc.add_document(f"doc {i} shared words")

        def reader():
            try:
                for _ in range(100):
                    scores.append(calc.score("shared words unknown"))
            except Exception as e:  # Collected and asserted below
                errors.append(e)

        threads = [threading.Thread(target=writer) for _ in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert calc.document_count == 400
        assert all(math.isfinite(s) and s > 0 for s in scores)
