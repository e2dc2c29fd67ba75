from __future__ import annotations

import sqlite3
import logging
from pathlib import Path
from typing import Optional

from hoteladmin.exceptions import StorageError

logger = logging.getLogger(__name__)


class SQLiteKeyValueStorage:
    """SQLite-backed key/value storage for session slots (token, current user)."""

    def __init__(self, db_url: str):
        # Format: sqlite:///path
        if db_url.startswith("sqlite:///"):
            self.db_path = db_url.replace("sqlite:///", "", 1)
        else:
            self.db_path = db_url

        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"SQLiteKeyValueStorage initialised. Database path: {self.db_path}")

    def _conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            return conn
        except sqlite3.Error as e:
            logger.error(f"Storage connection error: {e}")
            raise StorageError(f"Could not open session storage: {e}") from e

    # ------------------------------------
    # Lifecycle
    # ------------------------------------
    def init(self) -> None:
        """Creates the slot table if it does not exist."""
        try:
            with self._conn() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
                    )
                    """
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"SQLite error while creating kv_store: {e}")
            raise StorageError(f"Could not initialise session storage: {e}") from e

    # ------------------------------------
    # Slots
    # ------------------------------------
    def get_item(self, key: str) -> Optional[str]:
        try:
            with self._conn() as conn:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
                return row["value"] if row else None
        except sqlite3.Error as e:
            logger.error(f"Error reading slot '{key}': {e}")
            raise StorageError(f"Could not read '{key}': {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with self._conn() as conn:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, value),
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Error writing slot '{key}': {e}")
            raise StorageError(f"Could not write '{key}': {e}") from e

    def remove_item(self, key: str) -> bool:
        try:
            with self._conn() as conn:
                cur = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                conn.commit()
                return cur.rowcount > 0
        except sqlite3.Error as e:
            logger.error(f"Error removing slot '{key}': {e}")
            raise StorageError(f"Could not remove '{key}': {e}") from e

    def clear(self) -> None:
        try:
            with self._conn() as conn:
                conn.execute("DELETE FROM kv_store")
                conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Could not clear session storage: {e}") from e
