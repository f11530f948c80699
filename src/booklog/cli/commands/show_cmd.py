# ABOUTME: The `booklog show` command for displaying one book.
# ABOUTME: Shows all fields for a single logged book by ID.

from pathlib import Path

import click
from rich.console import Console

from booklog.cli.display import book_table
from booklog.cli.options import db_option, resolve_config
from booklog.db.catalog import BookCatalog
from booklog.db.connection import open_catalog

console = Console()


@click.command("show")
@click.argument("book_id", type=int)
@db_option
@click.pass_context
def show(ctx: click.Context, book_id: int, db_path: Path | None) -> None:
    """Show every field of a book by ID."""
    config = resolve_config(ctx, db_path)
    conn = open_catalog(config.db_path)
    try:
        record = BookCatalog(conn).get_book(book_id)
    finally:
        conn.close()

    if record is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    console.print(book_table(record))
