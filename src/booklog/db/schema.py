# ABOUTME: SQL DDL statements for the Booklog database schema.
# ABOUTME: Defines the books table, its indexes, and the ordered migration list.

SCHEMA_V1 = """
-- Reading log: one row per book
CREATE TABLE books (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    title       TEXT NOT NULL CHECK (length(trim(title)) > 0),
    author      TEXT,
    isbn        TEXT,
    rating      REAL,
    review      TEXT,
    read_date   TEXT,
    created_at  TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now')),
    updated_at  TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now'))
);

CREATE UNIQUE INDEX idx_books_isbn ON books(isbn) WHERE isbn IS NOT NULL;

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

# V2: indexes backing the sortable listing columns.
MIGRATION_V2 = """
CREATE INDEX IF NOT EXISTS idx_books_read_date ON books(read_date);
CREATE INDEX IF NOT EXISTS idx_books_rating ON books(rating);

INSERT INTO schema_version (version) VALUES (2);
"""

MIGRATIONS: list[tuple[int, str]] = [
    (2, MIGRATION_V2),
]
