"""
Text editor business layer.

- base: Abstract collaborator interfaces (fingerprint, repository, transliteration)
- service: EditorService tying them to the TF-IDF corpus
"""

from .base import ContentFingerprint, DocumentRepository, TransliterationProvider
from .service import EditorService

__all__ = [
    "ContentFingerprint",
    "DocumentRepository",
    "TransliterationProvider",
    "EditorService",
]
