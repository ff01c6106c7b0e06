"""
Application wiring for the editor back end.

Startup order (mirrors a process entry point):
1. Load .env.local / .env
2. Read Settings from the environment
3. Configure logging
4. Build EditorService with the caller's collaborators

Collaborators are passed in explicitly; nothing here is a global.
"""

import logging
from typing import Optional

from .config import Settings, load_env_files, load_settings
from .editor import DocumentRepository, EditorService, TransliterationProvider
from .logging_config import setup_logging
from .tfidf import TFIDFCalculator
from .utils import MD5Fingerprint

logger = logging.getLogger(__name__)


def configure(settings: Optional[Settings] = None, with_logging: bool = True) -> Settings:
    """Load environment and (optionally) logging; returns the effective Settings"""
    if settings is None:
        load_env_files()
        settings = load_settings()
    if with_logging:
        setup_logging(log_file=settings.log_file, console_level=settings.log_level)
    return settings


def create_editor_service(
    repository: DocumentRepository,
    transliterator: TransliterationProvider,
    settings: Optional[Settings] = None,
) -> EditorService:
    """
    Build an EditorService whose corpus uses the configured tokenizer policy.

    Args:
        repository: Document persistence
        transliterator: Transliteration provider
        settings: Explicit settings (default: Settings() defaults)
    """
    settings = settings or Settings()
    calculator = TFIDFCalculator.from_settings(settings)
    logger.info(f"Editor service ready: case_fold={settings.case_fold}")
    return EditorService(repository, MD5Fingerprint(), transliterator, calculator=calculator)
