"""Main CLI entry point."""

import logging

import click
from stockpile.database.factories import create_sqlite_database
from stockpile.domain.settings import SettingsService

# Import and register all commands at module level
from stockpile.cli.commands import (
    item,
    import_cmd,
    export_cmd,
    settings,
)


def configure_logging(verbosity: int) -> None:
    """Configure root logging from the -v count."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides STOCKPILE_DB_PATH environment variable)",
    envvar="STOCKPILE_DB_PATH",
)
@click.option(
    "--key-file",
    type=click.Path(),
    help="Path to item file key (overrides STOCKPILE_KEY_PATH environment variable)",
    envvar="STOCKPILE_KEY_PATH",
)
@click.option("-v", "--verbose", count=True, help="Increase log output (-vv for debug)")
@click.pass_context
def cli(ctx, db_path: str | None, key_file: str | None, verbose: int):
    """Stockpile - Inventory tracking application.

    Keep track of items in stock, their price and their provider, and move
    items between installations with encrypted item files.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)
    ctx.obj["key_file"] = key_file

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["settings_service"] = SettingsService(db)
        ctx.call_on_close(db.disconnect)


# Register all commands
item.register_commands(cli)
import_cmd.register_commands(cli)
export_cmd.register_commands(cli)
settings.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
