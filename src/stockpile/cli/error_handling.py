"""CLI error handling helpers."""

import logging

import click

from stockpile.domain.errors import DomainError, StorageError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | OSError) -> None:
    """Report a failed command on stderr and exit with status 1.

    Storage failures also name the database in use, as they usually mean the
    file is locked, unreadable or not a stockpile database.
    """
    logger.debug("Command '%s' failed", ctx.command_path, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, StorageError):
        db = ctx.find_root().obj.get("db")
        if db is not None:
            click.echo(f"Database: {db.database_url}", err=True)
    ctx.exit(1)
