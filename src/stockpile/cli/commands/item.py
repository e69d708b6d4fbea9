"""Item management commands."""

from dataclasses import replace

import click
from stockpile.cli.error_handling import handle_domain_error
from stockpile.cli.item_resolution import resolve_item_or_exit
from stockpile.domain.conversion import format_price
from stockpile.domain.entities import ItemDetails, ItemEntryState
from stockpile.domain.errors import DomainError
from stockpile.domain.item import ItemService, mask_sensitive
from stockpile.domain.item_entry import ItemEntryModel
from stockpile.domain.validation import is_blank
from stockpile.utils.number_parser import parse_price, parse_quantity


def describe_invalid(state: ItemEntryState) -> list[str]:
    """List human-readable reasons why an entry cannot be saved."""
    details = state.item_details
    problems = []
    if is_blank(details.name):
        problems.append("Name is required")
    if is_blank(details.price):
        problems.append("Price is required")
    if is_blank(details.quantity):
        problems.append("Quantity is required")
    if not state.is_phone_valid:
        problems.append(
            f"Provider phone '{details.provider_phone_number}' must be 8 followed by 10 digits"
        )
    if not state.is_email_valid:
        problems.append(f"Provider email '{details.provider_email}' is not a valid address")
    return problems


def warn_on_fallback(details: ItemDetails) -> None:
    """Warn when price or quantity text will be stored as zero."""
    try:
        parse_price(details.price)
    except ValueError as e:
        click.echo(f"Warning: {e}; price will be saved as 0", err=True)
    try:
        parse_quantity(details.quantity)
    except ValueError as e:
        click.echo(f"Warning: {e}; quantity will be saved as 0", err=True)


def apply_changes(details: ItemDetails, **changes) -> ItemDetails:
    """Return details with every non-None change applied."""
    return replace(details, **{k: v for k, v in changes.items() if v is not None})


def save_entry_or_exit(ctx: click.Context, model: ItemEntryModel, details: ItemDetails):
    """Validate and save an entry, or exit listing what is wrong."""
    state = model.update(details)
    if not state.is_entry_valid:
        for problem in describe_invalid(state):
            click.echo(f"Error: {problem}", err=True)
        ctx.exit(1)

    warn_on_fallback(details)
    try:
        return model.save()
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.group()
def item_group():
    """Manage items."""
    pass


@item_group.command("add")
@click.argument("name", metavar="ITEM_NAME")
@click.option("--price", required=True, help="Unit price (e.g., 12.50)")
@click.option("--quantity", required=True, help="Quantity in stock")
@click.option("--provider-name", help="Provider name (defaults from settings if enabled)")
@click.option("--provider-email", help="Provider email")
@click.option("--provider-phone", help="Provider phone (8 followed by 10 digits)")
@click.pass_context
def add_item(
    ctx,
    name: str,
    price: str,
    quantity: str,
    provider_name: str | None,
    provider_email: str | None,
    provider_phone: str | None,
):
    """Add a new item.

    When default fields are enabled in settings, provider fields that are
    not given on the command line are filled from the saved defaults.

    Examples:
        stockpile item add "Widget" --price 2.50 --quantity 10
        stockpile item add "Bolt" --price 0.10 --quantity 500 --provider-phone 81234567890
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings_service"].settings
    model = ItemEntryModel(ItemService(db), settings)

    details = apply_changes(
        model.state.item_details,
        name=name,
        price=price,
        quantity=quantity,
        provider_name=provider_name,
        provider_email=provider_email,
        provider_phone_number=provider_phone,
    )
    saved = save_entry_or_exit(ctx, model, details)
    click.echo(f"Created item '{saved.name}' (ID: {saved.id})")


@item_group.command("list")
@click.pass_context
def list_items(ctx):
    """List all items."""
    db = ctx.obj["db"]
    service = ItemService(db)

    items = service.list_items()
    if not items:
        click.echo("No items found.")
        return

    click.echo("\nItems:")
    click.echo("-" * 70)
    for it in items:
        click.echo(
            f"ID: {it.id:3d} | {it.name:24s} | Qty: {it.quantity:5d} | "
            f"{format_price(it.price):>12s} | {it.source_type.value}"
        )


@item_group.command("show")
@click.argument("item", metavar="ITEM")
@click.pass_context
def show_item(ctx, item: str):
    """Show item details.

    ITEM can be an item name or ID. Provider contact details are masked
    when hiding sensitive data is enabled in settings.
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings_service"].settings
    service = ItemService(db)

    item_id = resolve_item_or_exit(ctx, service, item)
    it = service.require_item(item_id)

    email = it.provider_email
    phone = it.provider_phone_number
    if settings.hide_sensitive_data:
        email = mask_sensitive(email)
        phone = mask_sensitive(phone)

    click.echo(f"Item {it.id}: {it.name}")
    click.echo(f"  Price: {format_price(it.price)}")
    click.echo(f"  Quantity: {it.quantity}")
    click.echo(f"  Provider: {it.provider_name}")
    click.echo(f"  Provider email: {email}")
    click.echo(f"  Provider phone: {phone}")
    click.echo(f"  Source: {it.source_type.value}")


@item_group.command("edit")
@click.argument("item", metavar="ITEM")
@click.option("--name", help="New item name")
@click.option("--price", help="New unit price")
@click.option("--quantity", help="New quantity in stock")
@click.option("--provider-name", help="New provider name")
@click.option("--provider-email", help="New provider email")
@click.option("--provider-phone", help="New provider phone")
@click.pass_context
def edit_item(
    ctx,
    item: str,
    name: str | None,
    price: str | None,
    quantity: str | None,
    provider_name: str | None,
    provider_email: str | None,
    provider_phone: str | None,
):
    """Edit an existing item.

    ITEM can be an item name or ID. Only the given fields change.

    Examples:
        stockpile item edit "Widget" --price 3.00
        stockpile item edit 2 --provider-email "" --provider-phone ""
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings_service"].settings
    service = ItemService(db)

    item_id = resolve_item_or_exit(ctx, service, item)
    model = ItemEntryModel.for_item(service, service.require_item(item_id), settings)

    details = apply_changes(
        model.state.item_details,
        name=name,
        price=price,
        quantity=quantity,
        provider_name=provider_name,
        provider_email=provider_email,
        provider_phone_number=provider_phone,
    )
    saved = save_entry_or_exit(ctx, model, details)
    click.echo(f"Updated item '{saved.name}' (ID: {saved.id})")


@item_group.command("delete")
@click.argument("item", metavar="ITEM")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_item(ctx, item: str, yes: bool):
    """Delete an item.

    ITEM can be an item name or ID.
    """
    db = ctx.obj["db"]
    service = ItemService(db)

    item_id = resolve_item_or_exit(ctx, service, item)
    it = service.require_item(item_id)

    if not yes and not click.confirm(f"Are you sure you want to delete item '{it.name}' (ID: {item_id})?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_item(item_id)
        click.echo(f"Deleted item '{it.name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@item_group.command("sell")
@click.argument("item", metavar="ITEM")
@click.pass_context
def sell_item(ctx, item: str):
    """Sell one unit of an item.

    ITEM can be an item name or ID.
    """
    db = ctx.obj["db"]
    service = ItemService(db)

    item_id = resolve_item_or_exit(ctx, service, item)
    try:
        sold = service.sell_item(item_id)
        click.echo(f"Sold one '{sold.name}', {sold.quantity} left")
    except DomainError as e:
        handle_domain_error(ctx, e)


@item_group.command("share")
@click.argument("item", metavar="ITEM")
@click.pass_context
def share_item(ctx, item: str):
    """Print an item summary suitable for sharing.

    ITEM can be an item name or ID.
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings_service"].settings
    service = ItemService(db)

    item_id = resolve_item_or_exit(ctx, service, item)
    try:
        click.echo(service.share_text(service.require_item(item_id), settings))
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register item commands with main CLI."""
    cli.add_command(item_group, name="item")
