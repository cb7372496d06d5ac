"""
Key-value backends - The persistent string medium behind DurableStore.

Provides:
- KeyValueBackend: the storage port (get/set of text under a string key)
- SqliteBackend: single-table SQLite file, one connection per call
- MemoryBackend: dict-backed, for tests and throwaway sessions
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Protocol


logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    """String-keyed, string-valued storage medium."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class SqliteBackend:
    """
    Store text values in a SQLite key-value table.

    Each call opens its own connection, so the backend holds no open
    handles between user actions. An unusable location does not fail
    construction: setup is retried on the next access, and the access
    error is left for DurableStore to log.
    """

    def __init__(self, db_path: str | Path):
        """
        Initialize backend.

        Args:
            db_path: Path to the SQLite file (parent directories are created)
        """
        self.db_path = Path(db_path)
        self.ready = False
        try:
            self._ensure_database()
        except (sqlite3.Error, OSError) as e:
            logger.warning(f"Storage at {self.db_path} is unavailable, state will not persist: {e}")

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                );
            """)
            conn.commit()
        finally:
            conn.close()
        self.ready = True

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        if not self.ready:
            self._ensure_database()
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get_item(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_connection()
        try:
            conn.execute(
                """INSERT INTO kv_store (key, value, updated_at)
                   VALUES (?, ?, CURRENT_TIMESTAMP)
                   ON CONFLICT(key) DO UPDATE SET
                     value = excluded.value,
                     updated_at = excluded.updated_at""",
                (key, value)
            )
            conn.commit()
        finally:
            conn.close()

    def keys(self) -> list[str]:
        """List stored keys."""
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT key FROM kv_store ORDER BY key")
            return [row["key"] for row in cursor.fetchall()]
        finally:
            conn.close()


class MemoryBackend:
    """Keep values in a dict; survives only as long as the instance."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def keys(self) -> list[str]:
        return sorted(self.items)
