# ABOUTME: The `booklog edit` command for rewriting a logged book.
# ABOUTME: Replaces all six editable fields; flags left out are cleared.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from booklog.cli.display import book_table, describe_input
from booklog.cli.options import book_field_options, db_option, resolve_config
from booklog.db.catalog import BookCatalog
from booklog.db.connection import open_catalog
from booklog.db.mapping import normalize_fields
from booklog.errors import ConstraintError, NotFoundError, ValidationError

console = Console()


@click.command("edit")
@click.argument("book_id", type=int)
@book_field_options
@db_option
@click.pass_context
def edit(
    ctx: click.Context,
    book_id: int,
    title: str,
    author: str | None,
    isbn: str | None,
    rating: str | None,
    review: str | None,
    read_date: str | None,
    db_path: Path | None,
) -> None:
    """Replace every field of a book. Omitted fields are cleared."""
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
        record = BookCatalog(conn).update_book(book_id, fields)
    except NotFoundError as exc:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1) from exc
    except ConstraintError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        console.print(f"[dim]You entered: {escape(attempted)}[/dim]")
        raise SystemExit(1) from exc
    finally:
        conn.close()

    console.print(f"Updated book [bold]{record.id}[/bold].")
    console.print(book_table(record))
