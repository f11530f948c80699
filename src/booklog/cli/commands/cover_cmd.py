# ABOUTME: The `booklog cover` command for resolving a cover image URL.
# ABOUTME: Prints the URL a cover request would redirect to, never failing on lookup errors.

import click

from booklog.cli.options import resolve_config
from booklog.config import BooklogConfig
from booklog.covers.resolver import CoverResolver, create_resolver


def _create_resolver(config: BooklogConfig) -> CoverResolver:
    """Create the default cover resolver (Open Library)."""
    return create_resolver(config)


@click.command("cover")
@click.argument("identifier")
@click.pass_context
def cover(ctx: click.Context, identifier: str) -> None:
    """Print the cover image URL for an ISBN ("none" gives the placeholder)."""
    config = resolve_config(ctx, None)
    target = _create_resolver(config).resolve(identifier)
    click.echo(target.url)
