# ABOUTME: CLI package for Booklog, built on Click.
# ABOUTME: Defines the root command group, loads config, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from booklog.cli.commands import add_cmd, cover_cmd, edit_cmd, ls_cmd, rm_cmd, show_cmd
from booklog.config import BooklogConfig


def _configure_logging(verbose: bool) -> None:
    """Route log records through Rich; DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(package_name="booklog")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Booklog - a personal reading log with cover lookup."""
    _configure_logging(verbose)
    try:
        ctx.obj = BooklogConfig.from_env()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc


cli.add_command(ls_cmd.ls)
cli.add_command(show_cmd.show)
cli.add_command(add_cmd.add)
cli.add_command(edit_cmd.edit)
cli.add_command(rm_cmd.rm)
cli.add_command(cover_cmd.cover)
