"""
Database connection provider

One explicitly constructed provider per process, passed to whatever needs
persistence (no module-level singleton). The backing connection is opened
lazily on first use and the same handle is returned on every later call,
from any thread.
"""

import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Lazily opened, shared connection handle"""

    def __init__(self, connect: Callable[[], Any], name: str = "editor-db"):
        """
        Args:
            connect: Zero-argument factory that opens the backing connection
                (called at most once per open/close cycle)
            name: Label used in log messages
        """
        self._connect = connect
        self.name = name
        self._connection: Optional[Any] = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def get_connection(self) -> Any:
        """
        Return the shared connection, opening it on first call.

        Raises:
            ConnectionError: the factory returned None
        """
        # Fast path without the lock once the handle exists
        connection = self._connection
        if connection is not None:
            return connection

        with self._lock:
            if self._connection is None:
                connection = self._connect()
                if connection is None:
                    raise ConnectionError(f"{self.name}: connection factory returned None")
                self._connection = connection
                logger.info(f"Connected: {self.name}")
            return self._connection

    def close(self):
        """Close the connection (if open); a later get_connection() reconnects"""
        with self._lock:
            connection, self._connection = self._connection, None
        if connection is None:
            return
        close = getattr(connection, "close", None)
        if callable(close):
            close()
        logger.info(f"Disconnected: {self.name}")

    def __enter__(self):
        return self.get_connection()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
