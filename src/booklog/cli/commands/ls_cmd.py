# ABOUTME: The `booklog ls` command for listing logged books.
# ABOUTME: Displays a sorted Rich table, or a JSON array with --json.

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from booklog.cli.display import format_rating
from booklog.cli.options import db_option, resolve_config
from booklog.db.catalog import BookCatalog
from booklog.db.connection import open_catalog
from booklog.db.ordering import SortField, SortOrder

console = Console()


@click.command("ls")
@db_option
@click.option(
    "--sort",
    "sort_field",
    default=SortField.RECENCY.value,
    show_default=True,
    help="Sort by rating, title, or recency (date read). Other values mean recency.",
)
@click.option(
    "--order",
    default=SortOrder.DESC.value,
    show_default=True,
    help=(
        "Sort direction, asc or desc. Other values mean desc. "
        "Books without a value always come last."
    ),
)
@click.option("--json", "as_json", is_flag=True, help="Print the books as a JSON array.")
@click.pass_context
def ls(
    ctx: click.Context,
    db_path: Path | None,
    sort_field: str,
    order: str,
    as_json: bool,
) -> None:
    """List all books in the reading log."""
    config = resolve_config(ctx, db_path)
    conn = open_catalog(config.db_path)
    try:
        records = BookCatalog(conn).list_books(sort_field, order)
    finally:
        conn.close()

    if as_json:
        click.echo(json.dumps([record.to_dict() for record in records], indent=2))
        return

    if not records:
        console.print("[yellow]No books in the log.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Rating", justify="right")
    table.add_column("Read")

    for record in records:
        table.add_row(
            str(record.id),
            escape(record.title),
            escape(record.author) if record.author else "[dim]unknown[/dim]",
            format_rating(record.rating),
            record.read_date.isoformat() if record.read_date else "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")
