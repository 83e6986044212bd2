"""Durable key-value slots for session flags.

``DuckDBKeyValueStore`` keeps a single ``kv_store`` table in a DuckDB file so
the logged-in flag survives restarts. ``InMemoryKeyValueStore`` offers the same
interface without touching disk.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import duckdb

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Flat string-to-string store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite ``key``."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``; removing a missing key is a no-op."""

    def close(self) -> None:
        pass


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class DuckDBKeyValueStore(KeyValueStore):
    """Key-value store backed by a DuckDB database file.

    Pass ``":memory:"`` as ``db_path`` for a throwaway database.
    """

    def __init__(self, db_path: str = ":memory:"):
        self.db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn: Optional[duckdb.DuckDBPyConnection] = duckdb.connect(db_path)
        self._create_schema()
        logger.info(f"Key-value store initialized: {self.db_path}")

    def _create_schema(self) -> None:
        self._require_conn().execute(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key VARCHAR PRIMARY KEY,
                value VARCHAR NOT NULL
            )
            """
        )

    def _require_conn(self) -> duckdb.DuckDBPyConnection:
        if self.conn is None:
            raise RuntimeError(f"Key-value store {self.db_path} is closed")
        return self.conn

    def get(self, key: str) -> Optional[str]:
        row = self._require_conn().execute(
            "SELECT value FROM kv_store WHERE key = ?", [key]
        ).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self._require_conn().execute(
            "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)", [key, value]
        )
        logger.debug(f"Stored key '{key}'")

    def remove(self, key: str) -> None:
        self._require_conn().execute("DELETE FROM kv_store WHERE key = ?", [key])
        logger.debug(f"Removed key '{key}'")

    def close(self) -> None:
        """Close the connection. Further reads and writes raise RuntimeError."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None
            logger.info(f"Key-value store closed: {self.db_path}")
