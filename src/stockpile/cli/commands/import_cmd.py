"""Item file import command."""

import click
from stockpile.cli.error_handling import handle_domain_error
from stockpile.cli.item_files import cipher_or_exit
from stockpile.domain.conversion import format_price
from stockpile.domain.errors import DomainError
from stockpile.domain.item_import import ItemImportService


@click.command("import")
@click.argument("item_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_item(ctx, item_file: str):
    """Import an item from an encrypted item file.

    If an item with the same name already exists, the imported item is
    renamed to "NAME (1)", "NAME (2)", and so on.
    """
    db = ctx.obj["db"]
    service = ItemImportService(db, cipher_or_exit(ctx))

    try:
        item = service.import_file(item_file)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Imported item '{item.name}' (ID: {item.id})")
    click.echo(f"  Price: {format_price(item.price)}")
    click.echo(f"  Quantity: {item.quantity}")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_item)
