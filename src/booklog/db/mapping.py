# ABOUTME: Converts between book dataclasses and SQLite row dictionaries.
# ABOUTME: Also normalizes and validates user-supplied fields before they are stored.

import math
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any

from booklog.errors import ValidationError


@dataclass(frozen=True)
class BookFields:
    """The six user-editable fields of a book.

    Create and update both take a complete BookFields: an update replaces every
    field, so anything left as None is cleared in the store.
    """

    title: str
    author: str | None = None
    isbn: str | None = None
    rating: float | None = None
    review: str | None = None
    read_date: date | None = None


@dataclass
class BookRecord:
    """A logged book: the editable fields plus database-managed columns."""

    id: int
    title: str
    author: str | None
    isbn: str | None
    rating: float | None
    review: str | None
    read_date: date | None
    created_at: str
    updated_at: str

    @property
    def fields(self) -> BookFields:
        """The editable part of this record, e.g. to prefill an edit."""
        return BookFields(
            title=self.title,
            author=self.author,
            isbn=self.isbn,
            rating=self.rating,
            review=self.review,
            read_date=self.read_date,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation with the read date as an ISO string."""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "rating": self.rating,
            "review": self.review,
            "read_date": self.read_date.isoformat() if self.read_date else None,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


def _clean_text(value: str | None) -> str | None:
    """Trim a text value, mapping blank strings to None."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def validate_fields(fields: BookFields) -> BookFields:
    """Check a BookFields and return its normalized form.

    Title, author, and ISBN are trimmed. Blank optional text becomes None.
    The review keeps its inner formatting and is only cleared when blank.

    Raises:
        ValidationError: If the title is blank, the rating is not a finite
            number, or the read date is not a plain date
            (a datetime is rejected).
    """
    title = _clean_text(fields.title) if isinstance(fields.title, str) else None
    if not title:
        raise ValidationError("Title is required.")

    rating = fields.rating
    if rating is not None:
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise ValidationError(f"Rating must be a number, got {rating!r}.")
        if not math.isfinite(rating):
            raise ValidationError(f"Rating must be a finite number, got {rating!r}.")
        rating = float(rating)

    read_date = fields.read_date
    if read_date is not None and (
        isinstance(read_date, datetime) or not isinstance(read_date, date)
    ):
        raise ValidationError(f"Read date must be a calendar date, got {read_date!r}.")

    review = fields.review
    if review is not None and not review.strip():
        review = None

    return replace(
        fields,
        title=title,
        author=_clean_text(fields.author),
        isbn=_clean_text(fields.isbn),
        rating=rating,
        review=review,
    )


def normalize_fields(
    title: str | None,
    author: str | None = None,
    isbn: str | None = None,
    rating: str | None = None,
    review: str | None = None,
    read_date: str | None = None,
) -> BookFields:
    """Build validated BookFields from raw form-style strings.

    Empty strings mean "not given". The rating is parsed as a float and the
    read date as an ISO date (YYYY-MM-DD).

    Raises:
        ValidationError: On a blank title or an unparseable rating or date.
    """
    parsed_rating: float | None = None
    rating_text = _clean_text(rating)
    if rating_text is not None:
        try:
            parsed_rating = float(rating_text)
        except ValueError as exc:
            raise ValidationError(f"Rating must be a number, got {rating!r}.") from exc

    parsed_date: date | None = None
    date_text = _clean_text(read_date)
    if date_text is not None:
        try:
            parsed_date = date.fromisoformat(date_text)
        except ValueError as exc:
            raise ValidationError(
                f"Read date must be in YYYY-MM-DD format, got {read_date!r}."
            ) from exc

    return validate_fields(
        BookFields(
            title=title or "",
            author=author,
            isbn=isbn,
            rating=parsed_rating,
            review=review,
            read_date=parsed_date,
        )
    )


def fields_to_row(fields: BookFields) -> dict[str, Any]:
    """Convert BookFields to a dict suitable for INSERT or UPDATE."""
    return {
        "title": fields.title,
        "author": fields.author,
        "isbn": fields.isbn,
        "rating": fields.rating,
        "review": fields.review,
        "read_date": fields.read_date.isoformat() if fields.read_date else None,
    }


def row_to_record(row: Any) -> BookRecord:
    """Convert a full database row (dict-like) to a BookRecord."""
    read_date = row["read_date"]
    return BookRecord(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        isbn=row["isbn"],
        rating=row["rating"],
        review=row["review"],
        read_date=date.fromisoformat(read_date) if read_date else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
