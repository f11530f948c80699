# ABOUTME: CRUD and sorted listing for the Booklog catalog.
# ABOUTME: Add, query, update, and delete books in the SQLite database.

import logging
import sqlite3

from booklog.db.mapping import (
    BookFields,
    BookRecord,
    fields_to_row,
    row_to_record,
    validate_fields,
)
from booklog.db.ordering import SortField, SortOrder, order_by_clause
from booklog.errors import ConstraintError, NotFoundError

logger = logging.getLogger(__name__)

# Strictly after both the current time and the previous value, so updated_at
# always moves forward even when two writes land in the same millisecond.
_TOUCH_UPDATED_AT = (
    "updated_at = MAX("
    "strftime('%Y-%m-%dT%H:%M:%f', 'now'), "
    "strftime('%Y-%m-%dT%H:%M:%f', updated_at, '+0.001 seconds'))"
)


def _constraint_error(exc: sqlite3.IntegrityError, fields: BookFields) -> ConstraintError:
    """Translate a SQLite integrity failure into a ConstraintError."""
    if "UNIQUE constraint failed: books.isbn" in str(exc):
        return ConstraintError(f"A book with ISBN {fields.isbn} already exists.")
    return ConstraintError(f"Book rejected by the database: {exc}")


class BookCatalog:
    """Wraps a sqlite3 connection and provides typed CRUD for the books table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def list_books(
        self,
        sort_field: str | SortField | None = SortField.RECENCY,
        order: str | SortOrder | None = SortOrder.DESC,
    ) -> list[BookRecord]:
        """Return every book in the requested order.

        Args:
            sort_field: "rating", "title", or "recency" (by read date).
                Anything else is treated as "recency".
            order: "asc" or "desc". Anything else is treated as "desc".

        Returns:
            Books with NULL sort values last and ties broken by ascending id.
        """
        field = SortField.parse(sort_field)
        direction = SortOrder.parse(order)
        cursor = self._conn.execute(f"SELECT * FROM books {order_by_clause(field, direction)}")
        return [row_to_record(row) for row in cursor.fetchall()]

    def get_book(self, book_id: int) -> BookRecord | None:
        """Retrieve a book by its row ID, or None if there is no such book."""
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def add_book(self, fields: BookFields) -> BookRecord:
        """Add a book to the catalog.

        Args:
            fields: The book's editable fields. They are validated and
                normalized before storage.

        Returns:
            The stored record, including its generated id and timestamps.

        Raises:
            ValidationError: If the fields are invalid (e.g. blank title).
            ConstraintError: If the database rejects the row, e.g. because
                another book already has this ISBN.
        """
        clean = validate_fields(fields)
        row = fields_to_row(clean)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        try:
            cursor = self._conn.execute(
                f"INSERT INTO books ({columns}) VALUES ({placeholders})",
                list(row.values()),
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            raise _constraint_error(exc, clean) from exc

        book_id = cursor.lastrowid
        logger.debug("Added book %d: %s", book_id, clean.title)
        record = self.get_book(book_id)  # type: ignore[arg-type]
        assert record is not None
        return record

    def update_book(self, book_id: int, fields: BookFields) -> BookRecord:
        """Replace all editable fields of a book and refresh updated_at.

        There is no partial merge: fields left as None are cleared.

        Raises:
            ValidationError: If the fields are invalid.
            NotFoundError: If the book_id does not exist.
            ConstraintError: If the database rejects the new values.
        """
        clean = validate_fields(fields)
        row = fields_to_row(clean)
        set_clause = ", ".join(f"{k} = ?" for k in row)
        set_clause += f", {_TOUCH_UPDATED_AT}"

        try:
            cursor = self._conn.execute(
                f"UPDATE books SET {set_clause} WHERE id = ?",
                [*row.values(), book_id],
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            raise _constraint_error(exc, clean) from exc

        if cursor.rowcount == 0:
            raise NotFoundError(f"Book with id {book_id} not found")

        record = self.get_book(book_id)
        if record is None:
            raise NotFoundError(f"Book with id {book_id} not found")
        return record

    def delete_book(self, book_id: int) -> None:
        """Delete a book from the catalog. Deleting a missing id is a no-op."""
        cursor = self._conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
        self._conn.commit()
        if cursor.rowcount:
            logger.debug("Deleted book %d", book_id)
