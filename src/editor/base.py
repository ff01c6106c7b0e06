"""
Abstract collaborator interfaces for the editor service.

The service depends on these contracts only, so each can be swapped
(database-backed, remote API, in-memory test fake) without touching it.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class ContentFingerprint(ABC):
    """Fixed-length deterministic digest of text content"""

    digest_size: int = 0

    @abstractmethod
    def fingerprint(self, text: str) -> str:
        """
        Digest of text.

        Same input gives the same digest; a one-character change gives a
        different digest of the same length. Empty string is valid input.

        Raises:
            InvalidArgumentError: text is None
        """
        pass


class TransliterationProvider(ABC):
    """External transliteration (e.g. Arabic script to Latin)"""

    @abstractmethod
    def transliterate(self, document_id: int, text: str) -> Optional[str]:
        """
        Transliterate text belonging to a document.

        Args:
            document_id: Editor document identifier
            text: Text to convert (never None, the service validates it)

        Returns:
            Transliterated text, or None when no transliteration is available
            (unknown or invalid document_id)
        """
        pass


class DocumentRepository(ABC):
    """Persistence for editor documents"""

    @abstractmethod
    def save_document(self, name: str, content: str, content_hash: str) -> bool:
        """
        Store (or overwrite) a document.

        Returns:
            True if the document was stored
        """
        pass

    @abstractmethod
    def get_document(self, name: str) -> Optional[Tuple[str, str]]:
        """
        Fetch a stored document.

        Returns:
            Tuple of (content, content_hash) if it exists, None otherwise
        """
        pass
