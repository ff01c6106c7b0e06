"""
Tokenizer for TF-IDF term extraction.

Tokenization pipeline:
1. Reject None input (InvalidArgumentError)
2. Optional case folding (off by default: "Test" and "test" are different terms)
3. Split on whitespace and on the punctuation stop-set
4. Drop empty fragments

No stemming and no stopword removal. Text in any script (Arabic, Cyrillic,
CJK, ...) is kept as-is, only the separators above are recognised.
"""

import re
import string
from typing import Iterable, List, Optional

from ..errors import require_text

# ASCII punctuation plus the Unicode punctuation that shows up in editor text
# (Arabic comma/semicolon/question mark, typographic quotes, dashes, ellipsis)
DEFAULT_PUNCTUATION = string.punctuation + "،؛؟«»“”‘’„–—…·¿¡"


class Tokenizer:
    """
    Whitespace + punctuation tokenizer.

    The punctuation set is configurable; every character in it acts as a
    separator, exactly like whitespace.
    """

    def __init__(self, punctuation: Optional[Iterable[str]] = None, case_fold: bool = False):
        """
        Initialize tokenizer.

        Args:
            punctuation: Characters treated as separators
                Default: DEFAULT_PUNCTUATION
            case_fold: Apply str.casefold() before splitting
                Default: False (case-sensitive terms)
        """
        if punctuation is None:
            punctuation = DEFAULT_PUNCTUATION
        self.punctuation = "".join(sorted(set(punctuation)))
        self.case_fold = case_fold

        separators = r"\s" + re.escape(self.punctuation) if self.punctuation else r"\s"
        self._splitter = re.compile(f"[{separators}]+")

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into terms.

        Args:
            text: Input text (must not be None)

        Returns:
            Terms in left-to-right order

        Raises:
            InvalidArgumentError: text is None

        Examples:
            >>> Tokenizer().tokenize("the cat, the mat!")
            ['the', 'cat', 'the', 'mat']

            >>> Tokenizer().tokenize("This is a Test")
            ['This', 'is', 'a', 'Test']

            >>> Tokenizer(case_fold=True).tokenize("This is a Test")
            ['this', 'is', 'a', 'test']

            >>> Tokenizer().tokenize("!@#$%")
            []
        """
        require_text(text)
        if not text:
            return []

        if self.case_fold:
            text = text.casefold()

        return [t for t in self._splitter.split(text) if t]

    def __repr__(self) -> str:
        return f"Tokenizer(case_fold={self.case_fold}, punctuation={self.punctuation!r})"


_default_tokenizer = Tokenizer()


def tokenize(text: str) -> List[str]:
    """Tokenize with the default policy (case-sensitive, DEFAULT_PUNCTUATION)"""
    return _default_tokenizer.tokenize(text)
