# kit_api/services/store.py
"""
Persistent store backed by sqlite.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Any, List

logger = logging.getLogger(__name__)


class DatabaseProvider:
    """
    Thin sqlite access layer.
    Connections are opened per operation, so the provider is safe to share.
    """

    def __init__(self, db_path: str, timeout: float = 5.0):
        self.db_path = db_path
        self.timeout = timeout

    @contextmanager
    def get_connection(self):
        """Open a connection, closing it on exit"""
        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        conn = sqlite3.connect(self.db_path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def execute(self, query: str, params: tuple = None) -> List[Any]:
        """Execute a query and return every row"""
        with self.get_connection() as conn:
            cursor = conn.execute(query, params or ())
            rows = cursor.fetchall()
            conn.commit()
            return rows

    def init_schema(self) -> None:
        """Create the tables the application needs"""
        with self.get_connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS jwks (
                    id           TEXT      PRIMARY KEY,
                    public_key   TEXT      NOT NULL,
                    private_key  TEXT      NOT NULL,
                    created_at   TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                );
                """
            )
            conn.commit()
        logger.info("✅ Database schema initialized")
