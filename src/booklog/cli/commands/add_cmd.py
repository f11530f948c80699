# ABOUTME: The `booklog add` command for logging a new book.
# ABOUTME: Validates the field flags, stores the book, and prints the new record.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from booklog.cli.display import book_table, describe_input
from booklog.cli.options import book_field_options, db_option, resolve_config
from booklog.db.catalog import BookCatalog
from booklog.db.connection import open_catalog
from booklog.db.mapping import normalize_fields
from booklog.errors import ConstraintError, ValidationError

console = Console()


@click.command("add")
@book_field_options
@db_option
@click.pass_context
def add(
    ctx: click.Context,
    title: str,
    author: str | None,
    isbn: str | None,
    rating: str | None,
    review: str | None,
    read_date: str | None,
    db_path: Path | None,
) -> None:
    """Add a book to the reading log."""
    attempted = describe_input(title, author, isbn, rating, review, read_date)
    try:
        fields = normalize_fields(title, author, isbn, rating, review, read_date)
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        console.print(f"[dim]You entered: {escape(attempted)}[/dim]")
        raise SystemExit(1) from exc

    config = resolve_config(ctx, db_path)
    conn = open_catalog(config.db_path)
    try:
        record = BookCatalog(conn).add_book(fields)
    except ConstraintError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        console.print(f"[dim]You entered: {escape(attempted)}[/dim]")
        raise SystemExit(1) from exc
    finally:
        conn.close()

    console.print(f"Added book [bold]{record.id}[/bold].")
    console.print(book_table(record))
