# ABOUTME: Rich rendering helpers shared by the Booklog CLI commands.
# ABOUTME: Formats a single book as a two-column field/value table.

from rich.markup import escape
from rich.table import Table

from booklog.db.mapping import BookRecord


def format_rating(rating: float | None) -> str:
    return f"{rating:g}" if rating is not None else ""


def book_table(record: BookRecord) -> Table:
    """Build a field/value table showing every column of a book."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")

    table.add_row("ID", str(record.id))
    table.add_row("Title", escape(record.title))
    table.add_row("Author", escape(record.author or "unknown"))
    if record.isbn:
        table.add_row("ISBN", escape(record.isbn))
    if record.rating is not None:
        table.add_row("Rating", format_rating(record.rating))
    if record.read_date:
        table.add_row("Read", record.read_date.isoformat())
    if record.review:
        table.add_row("Review", escape(record.review))
    table.add_row("Added", record.created_at)
    table.add_row("Modified", record.updated_at)
    return table


def describe_input(
    title: str | None,
    author: str | None,
    isbn: str | None,
    rating: str | None,
    review: str | None,
    read_date: str | None,
) -> str:
    """Echo back what the user typed so a rejected entry can be corrected."""
    given = {
        "title": title,
        "author": author,
        "isbn": isbn,
        "rating": rating,
        "review": review,
        "read-date": read_date,
    }
    return " ".join(f"--{k} {v!r}" for k, v in given.items() if v is not None)
