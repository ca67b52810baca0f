"""Data Access Layer over the SQLite metadata table.

The calculator only needs a string-keyed key/value store; `Database` is the
persistent implementation handed to the bank store service.
"""

from __future__ import annotations

from pathlib import Path
import sqlite3
from typing import Optional

UTC_NOW_SQL = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    # ------------------------------------------------------------------
    # Key/value access
    def get_value(self, key: str) -> Optional[str]:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT value FROM metadata WHERE key = ?", (key,))
            row = cur.fetchone()
            return row["value"] if row else None

    def set_value(self, key: str, value: str) -> None:
        with self._connect() as conn:
            conn.execute(
                f"""
                INSERT INTO metadata (key, value)
                VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = ({UTC_NOW_SQL})
                """,
                (key, value),
            )

    def delete_value(self, key: str) -> bool:
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM metadata WHERE key = ?", (key,))
            return cur.rowcount > 0
