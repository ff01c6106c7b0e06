"""
Editor service - file import, saving, change detection and transliteration.

Wires the injected collaborators (fingerprint, repository, transliteration)
to the TF-IDF calculator: every document that is imported or saved also
becomes part of the relevance corpus.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..errors import require_text
from ..tfidf import TFIDFCalculator
from .base import ContentFingerprint, DocumentRepository, TransliterationProvider

logger = logging.getLogger(__name__)


class EditorService:
    """Business operations of the text editor"""

    def __init__(
        self,
        repository: DocumentRepository,
        fingerprint: ContentFingerprint,
        transliterator: TransliterationProvider,
        calculator: Optional[TFIDFCalculator] = None,
    ):
        self.repository = repository
        self.fingerprint = fingerprint
        self.transliterator = transliterator
        self.calculator = calculator or TFIDFCalculator()

    def import_text_file(self, path: Optional[Union[str, Path]], name: str) -> bool:
        """
        Import a UTF-8 text file as a new document.

        Args:
            path: File to read (None is tolerated and returns False)
            name: Document name to store it under

        Returns:
            True if the document was stored, False for a missing path, blank
            name, unreadable or non-UTF-8 file, or a refused save
        """
        if path is None:
            logger.warning("Import skipped: no file given")
            return False
        if not name or not name.strip():
            logger.warning(f"Import skipped: empty document name for {path}")
            return False

        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            logger.warning(f"Import failed: cannot read {path}: {e}")
            return False

        try:
            content = raw.decode("utf-8-sig")  # Strip BOM written by some editors
        except UnicodeDecodeError as e:
            logger.warning(f"Import failed: {path} is not valid UTF-8: {e}")
            return False

        stored = self.save_document(name, content)
        if stored:
            logger.info(f"Imported {path} as '{name}' ({len(raw)} bytes)")
        return stored

    def save_document(self, name: str, content: str) -> bool:
        """
        Persist a document with its fingerprint and add it to the corpus.

        Raises:
            InvalidArgumentError: name or content is None
        """
        require_text(name, "name")
        require_text(content, "content")

        content_hash = self.fingerprint.fingerprint(content)
        if not self.repository.save_document(name, content, content_hash):
            logger.warning(f"Repository refused document '{name}'")
            return False

        self.calculator.add_document(content)
        logger.debug(f"Saved '{name}' (hash={content_hash}, corpus={self.calculator.document_count})")
        return True

    def has_external_changes(self, name: str, content: str) -> bool:
        """
        Check whether content differs from what was last stored under name.

        Returns:
            True if the fingerprints differ or nothing is stored under name
        """
        require_text(content, "content")
        stored = self.repository.get_document(name)
        if stored is None:
            return True
        _, stored_hash = stored
        return self.fingerprint.fingerprint(content) != stored_hash

    def transliterate(self, document_id: int, text: str) -> Optional[str]:
        """
        Transliterate text via the provider.

        Returns:
            Provider result; None means no transliteration is available

        Raises:
            InvalidArgumentError: text is None
        """
        require_text(text)
        return self.transliterator.transliterate(document_id, text)

    def relevance(self, content: str) -> float:
        """TF-IDF relevance of content against every imported/saved document"""
        return self.calculator.score(content)
