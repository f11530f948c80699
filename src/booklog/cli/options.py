# ABOUTME: Shared Click options and helpers for Booklog CLI commands.
# ABOUTME: Provides the --db flag, the book field flags, and config resolution.

import dataclasses
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from booklog.config import DEFAULT_DB_PATH, BooklogConfig

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to booklog database (default: $BOOKLOG_DB or {DEFAULT_DB_PATH})",
)


def book_field_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the six editable book fields as options."""
    options = [
        click.option("--title", required=True, help="Book title (required)."),
        click.option("--author", default=None, help="Author name."),
        click.option("--isbn", default=None, help="ISBN, used for cover lookup."),
        click.option("--rating", default=None, help="Numeric rating, e.g. 4.5."),
        click.option("--review", default=None, help="Free-form review notes."),
        click.option("--read-date", "read_date", default=None, help="Date read (YYYY-MM-DD)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_config(ctx: click.Context, db_path: Path | None) -> BooklogConfig:
    """Return the startup config, with --db taking precedence over the environment."""
    config = ctx.find_object(BooklogConfig)
    if config is None:
        config = BooklogConfig.from_env()
    if db_path is not None:
        config = dataclasses.replace(config, db_path=db_path)
    return config
