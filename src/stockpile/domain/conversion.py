"""Conversion between item entry snapshots and persisted items."""

import logging
from decimal import Decimal

from stockpile.domain.entities import Item, ItemDetails
from stockpile.utils.number_parser import parse_price, parse_quantity

logger = logging.getLogger(__name__)


def price_or_zero(price_str: str) -> Decimal:
    """Parse price text, falling back to zero when it cannot be parsed."""
    try:
        return parse_price(price_str)
    except ValueError as e:
        logger.debug("Price fallback to 0: %s", e)
        return Decimal("0")


def quantity_or_zero(quantity_str: str) -> int:
    """Parse quantity text, falling back to zero when it cannot be parsed."""
    try:
        return parse_quantity(quantity_str)
    except ValueError as e:
        logger.debug("Quantity fallback to 0: %s", e)
        return 0


def render_price(price: Decimal) -> str:
    """Render a price in canonical text form.

    Whole values keep one fractional digit and trailing zeros are dropped,
    so Decimal("7") and Decimal("7.00") both render as "7.0".
    """
    if price == price.to_integral_value():
        return f"{int(price)}.0"
    return format(price.normalize(), "f")


def to_item(details: ItemDetails) -> Item:
    """Convert an entry snapshot to an Item.

    Price and quantity that cannot be parsed become zero; all other fields
    are copied verbatim.
    """
    return Item(
        id=details.id,
        name=details.name,
        price=price_or_zero(details.price),
        quantity=quantity_or_zero(details.quantity),
        provider_name=details.provider_name,
        provider_email=details.provider_email,
        provider_phone_number=details.provider_phone_number,
        source_type=details.source_type,
    )


def to_details(item: Item) -> ItemDetails:
    """Convert an Item back to an editable entry snapshot."""
    return ItemDetails(
        id=item.id,
        name=item.name,
        price=render_price(item.price),
        quantity=str(item.quantity),
        provider_name=item.provider_name,
        provider_email=item.provider_email,
        provider_phone_number=item.provider_phone_number,
        source_type=item.source_type,
    )


def format_price(price: Decimal, currency: str = "$") -> str:
    """Format a price for display, e.g. "$1,234.50"."""
    return f"{currency}{price:,.2f}"
