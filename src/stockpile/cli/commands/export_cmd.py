"""Item file export command."""

import click
from stockpile.cli.error_handling import handle_domain_error
from stockpile.cli.item_files import cipher_or_exit
from stockpile.cli.item_resolution import resolve_item_or_exit
from stockpile.domain.errors import DomainError
from stockpile.domain.item import ItemService
from stockpile.domain.item_export import ItemExportService


@click.command("export")
@click.argument("item", metavar="ITEM")
@click.argument("item_file", type=click.Path(dir_okay=False))
@click.pass_context
def export_item(ctx, item: str, item_file: str):
    """Export an item to an encrypted item file.

    ITEM can be an item name or ID.

    Examples:
        stockpile export "Widget" widget.item
        stockpile export 3 /tmp/item3.item
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings_service"].settings
    item_id = resolve_item_or_exit(ctx, ItemService(db), item)
    service = ItemExportService(db, cipher_or_exit(ctx), settings)

    try:
        exported = service.export_item(item_id, item_file)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Exported item '{exported.name}' to {item_file}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_item)
