"""Unit test configuration - isolated environment and in-memory collaborators"""

from typing import Dict, List, Optional, Tuple

import pytest

from src.editor.base import DocumentRepository, TransliterationProvider

CONFIG_ENV_VARS = ("TFIDF_CASE_FOLD", "TFIDF_PUNCTUATION", "LOG_LEVEL", "LOG_FILE")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove config variables so tests start from defaults"""
    for name in CONFIG_ENV_VARS:
        # setenv first so monkeypatch restores the original state even when
        # load_dotenv() writes these variables during the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class InMemoryRepository(DocumentRepository):
    """Dict-backed repository; `accept=False` simulates a refusing store"""

    def __init__(self, accept: bool = True):
        self.accept = accept
        self.documents: Dict[str, Tuple[str, str]] = {}
        self.save_calls: List[str] = []

    def save_document(self, name: str, content: str, content_hash: str) -> bool:
        self.save_calls.append(name)
        if not self.accept:
            return False
        self.documents[name] = (content, content_hash)
        return True

    def get_document(self, name: str) -> Optional[Tuple[str, str]]:
        return self.documents.get(name)


class TableTransliterator(TransliterationProvider):
    """Looks up transliterations in a {(document_id, text): result} table"""

    def __init__(self, table: Optional[Dict[Tuple[int, str], str]] = None):
        self.table = table or {}
        self.calls: List[Tuple[int, str]] = []

    def transliterate(self, document_id: int, text: str) -> Optional[str]:
        self.calls.append((document_id, text))
        return self.table.get((document_id, text))


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def transliterator():
    return TableTransliterator({
        (1, "مرحبا"): "marhaba",
        (1, ""): "",
        (1, "!@#$%^&*()"): "!@#$%^&*()",
    })


@pytest.fixture
def refusing_repository():
    return InMemoryRepository(accept=False)
