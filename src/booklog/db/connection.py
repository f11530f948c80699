# ABOUTME: SQLite connection management for the Booklog catalog.
# ABOUTME: Opens or creates the database file and brings its schema up to date.

import logging
import sqlite3
from pathlib import Path

from booklog.config import DEFAULT_DB_PATH
from booklog.db.schema import MIGRATIONS, SCHEMA_V1

logger = logging.getLogger(__name__)


def _get_schema_version(conn: sqlite3.Connection) -> int:
    """Return the applied schema version, or 0 for a brand-new database."""
    has_versions = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type='table' AND name='schema_version'"
    ).fetchone()
    if not has_versions:
        return 0
    row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    return row[0] or 0


def _apply_migrations(conn: sqlite3.Connection) -> None:
    """Create the base schema if needed, then run newer migrations in order."""
    current = _get_schema_version(conn)
    if current == 0:
        conn.executescript(SCHEMA_V1)
        current = 1
        logger.debug("Created booklog schema v1")

    for version, sql in MIGRATIONS:
        if version > current:
            conn.executescript(sql)
            logger.debug("Applied booklog migration v%d", version)


def open_catalog(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Booklog database.

    Parent directories are created as needed. Rows come back as sqlite3.Row
    so columns can be read by name.

    Args:
        path: Database file. Defaults to ~/.booklog/books.db.

    Returns:
        A configured sqlite3.Connection with the latest schema.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    _apply_migrations(conn)
    return conn
