"""
SQLite storage and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and the ``SaloonStore`` record store.  Saloons are kept
in a single ordered table keyed by id; each row holds the whole
aggregate, including its embedded services, as one JSON document.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from .config import settings
from ..schemas.saloon import Saloon

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: saloon records
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS saloons (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL
        );
        """,
    ),
    # Migration 2: audit trail of successful mutations
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS audit_logs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            actor TEXT,
            action TEXT NOT NULL,
            object_type TEXT,
            object_id TEXT,
            timestamp TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            details TEXT
        );
        CREATE INDEX IF NOT EXISTS idx_audit_logs_object_id ON audit_logs(object_id);
        """,
    ),
]


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    Changes are committed when the block completes without error and
    rolled back otherwise.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  To add a migration, append it with an incremented
    version number.
    """
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version


class SaloonStore:
    """Ordered key-value store of saloon records.

    Every method opens its own connection, so an ``insert`` is visible
    to the next ``get`` or ``values`` call as soon as it returns.
    ``values`` yields records in ascending id order.  Values are parsed
    from storage on every read, so callers always receive their own
    copy.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def get(self, saloon_id: str) -> Optional[Saloon]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT data FROM saloons WHERE id = ?", (saloon_id,)
            ).fetchone()
        if not row:
            return None
        return Saloon.model_validate_json(row["data"])

    def insert(self, saloon_id: str, saloon: Saloon) -> None:
        """Store ``saloon`` under ``saloon_id``, replacing any existing value."""
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT OR REPLACE INTO saloons (id, data) VALUES (?, ?)",
                (saloon_id, saloon.model_dump_json(by_alias=True)),
            )

    def remove(self, saloon_id: str) -> Optional[Saloon]:
        """Delete the value stored under ``saloon_id`` and return it, if any."""
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT data FROM saloons WHERE id = ?", (saloon_id,)
            ).fetchone()
            if not row:
                return None
            cursor.execute("DELETE FROM saloons WHERE id = ?", (saloon_id,))
        return Saloon.model_validate_json(row["data"])

    def values(self) -> List[Saloon]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute("SELECT data FROM saloons ORDER BY id").fetchall()
        return [Saloon.model_validate_json(row["data"]) for row in rows]
