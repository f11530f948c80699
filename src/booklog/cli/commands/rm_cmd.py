# ABOUTME: The `booklog rm` command for deleting a logged book.
# ABOUTME: Deleting an ID that does not exist succeeds silently.

from pathlib import Path

import click
from rich.console import Console

from booklog.cli.options import db_option, resolve_config
from booklog.db.catalog import BookCatalog
from booklog.db.connection import open_catalog

console = Console()


@click.command("rm")
@click.argument("book_id", type=int)
@db_option
@click.pass_context
def rm(ctx: click.Context, book_id: int, db_path: Path | None) -> None:
    """Delete a book by ID."""
    config = resolve_config(ctx, db_path)
    conn = open_catalog(config.db_path)
    try:
        BookCatalog(conn).delete_book(book_id)
    finally:
        conn.close()

    console.print(f"Deleted book {book_id}.")
