# -*- coding: utf-8 -*-
"""
Local SQLite database.

Holds client-side state only (wizard drafts); everything else lives behind
the REST API.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional

from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS wizard_drafts (
    draft_id TEXT PRIMARY KEY,
    wizard_type TEXT NOT NULL,
    reference_number TEXT,
    current_step TEXT,
    state_data TEXT NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_wizard_drafts_type ON wizard_drafts (wizard_type);
"""


class Database:
    """SQLite connection wrapper with dict rows."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize database.

        Args:
            db_path: SQLite file; defaults to Config.DB_PATH
        """
        if db_path is None:
            from app.config import Config
            db_path = Config.DB_PATH

        self._db_path = Path(db_path)
        self._connection: Optional[sqlite3.Connection] = None

        # Ensure directory exists
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        """Get database file path."""
        return self._db_path

    def _dict_factory(self, cursor, row) -> Dict[str, Any]:
        """Convert row to dictionary."""
        columns = [col[0] for col in cursor.description]
        return {col: row[idx] for idx, col in enumerate(columns)}

    def get_connection(self) -> sqlite3.Connection:
        """Get connection, connecting if needed."""
        if self._connection is None:
            self._connection = sqlite3.connect(str(self._db_path))
            self._connection.row_factory = self._dict_factory
            logger.debug(f"SQLite connection opened: {self._db_path}")
        return self._connection

    def initialize(self) -> None:
        """Create tables if they do not exist."""
        conn = self.get_connection()
        conn.executescript(SCHEMA)
        conn.commit()
        logger.info(f"Database initialized: {self._db_path}")

    @contextmanager
    def transaction(self):
        """
        Transaction context manager.

        Usage:
            with db.transaction() as conn:
                # Operations auto-commit on success, rollback on error
        """
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise

    def execute(self, query: str, params: tuple = ()) -> int:
        """
        Execute a write query.

        Returns:
            Number of affected rows
        """
        with self.transaction() as conn:
            cursor = conn.execute(query, params)
            return cursor.rowcount

    def fetch_one(self, query: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
        """Execute query and fetch single row."""
        return self.get_connection().execute(query, params).fetchone()

    def fetch_all(self, query: str, params: tuple = ()) -> List[Dict[str, Any]]:
        """Execute query and fetch all rows."""
        return self.get_connection().execute(query, params).fetchall()

    def close(self) -> None:
        """Close SQLite connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug("SQLite connection closed")
