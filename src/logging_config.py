"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'


def cleanup_session_logs(log_path: Path, keep: int = 5) -> int:
    """
    Delete old session logs, keeping the newest `keep - 1` so the session
    about to start brings the total back to `keep`.

    Returns:
        Number of files removed
    """
    existing_logs = sorted(log_path.parent.glob(f"{log_path.stem}_*.log"), reverse=True)  # Newest first
    removed = 0
    for old_log in existing_logs[max(keep - 1, 0):]:
        try:
            old_log.unlink()
            removed += 1
        except OSError:
            pass  # File held by another process, retry next session
    return removed


def setup_logging(
    log_file: str = "logs/tfidf-editor.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    keep_sessions: int = 5,
) -> Optional[Path]:
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation

    Rotation policy:
    - New log file per process start (timestamp-based naming)
    - Keep last `keep_sessions` log files (cleanup on startup)
    - Auto-rotate when file reaches 10MB

    Args:
        log_file: Base path to log file (relative to working directory)
        console_level: Console logging level
        file_level: File logging level
        keep_sessions: Number of session log files to retain

    Returns:
        Path of this session's log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    cleanup_session_logs(log_path, keep=keep_sessions)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
