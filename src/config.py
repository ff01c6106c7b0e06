"""
Settings loaded from environment variables.

Environment is read from .env.local (local dev, highest priority) or .env
when present, then from the process environment.

Variables:
    TFIDF_CASE_FOLD: "true" to fold case before tokenizing (default: false)
    TFIDF_PUNCTUATION: Characters treated as term separators
        (default: src.tfidf.tokenizer.DEFAULT_PUNCTUATION)
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base path of the rotating log file (default: logs/tfidf-editor.log)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .tfidf.tokenizer import DEFAULT_PUNCTUATION

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    case_fold: bool = False
    punctuation: str = DEFAULT_PUNCTUATION
    log_level: int = logging.INFO
    log_file: str = "logs/tfidf-editor.log"


def load_env_files(root: Optional[Path] = None) -> Optional[Path]:
    """
    Load .env.local or .env from the project root into os.environ.

    Returns:
        Path of the loaded file, or None when neither exists
    """
    root = root or PROJECT_ROOT
    for name in (".env.local", ".env"):
        env_file = root / name
        if env_file.exists():
            load_dotenv(env_file, override=True)
            logger.info(f"Loaded environment from: {env_file}")
            return env_file
    return None


def load_settings() -> Settings:
    """Build Settings from the current environment (call load_env_files() first if needed)"""
    case_fold = os.getenv("TFIDF_CASE_FOLD", "false").strip().lower() in TRUE_VALUES

    # Empty TFIDF_PUNCTUATION is meaningful: whitespace-only splitting
    punctuation = os.getenv("TFIDF_PUNCTUATION")
    if punctuation is None:
        punctuation = DEFAULT_PUNCTUATION

    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown LOG_LEVEL: {log_level_name}")

    return Settings(
        case_fold=case_fold,
        punctuation=punctuation,
        log_level=log_level,
        log_file=os.getenv("LOG_FILE", "logs/tfidf-editor.log"),
    )
