"""Price and quantity parsing utilities."""

from decimal import Decimal
import re

_PRICE_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_QUANTITY_RE = re.compile(r"[+-]?[0-9]+")

# Largest power of ten a stored price may reach (Numeric(12, 2) column).
MAX_PRICE_EXPONENT = 9
MAX_QUANTITY = 2**31 - 1


def parse_price(price_str: str) -> Decimal:
    """Parse a price string into a non-negative Decimal.

    Accepts plain decimal notation with an optional exponent:
    - "12"
    - "12.50"
    - ".5"
    - "1e3"

    Locale-specific separators ("12,50"), currency symbols and special
    values such as "NaN" or "Infinity" are rejected.

    Args:
        price_str: Price text

    Returns:
        Decimal price

    Raises:
        ValueError: If the text is not a valid non-negative price
    """
    if price_str is None or not price_str.strip():
        raise ValueError("Empty price string")

    price_str = price_str.strip()
    if not _PRICE_RE.fullmatch(price_str):
        raise ValueError(f"Could not parse price '{price_str}'")

    price = Decimal(price_str)
    if price < 0:
        raise ValueError(f"Price cannot be negative: '{price_str}'")
    if price and price.adjusted() > MAX_PRICE_EXPONENT:
        raise ValueError(f"Price out of range: '{price_str}'")
    return price


def parse_quantity(quantity_str: str) -> int:
    """Parse a quantity string into a non-negative integer.

    Args:
        quantity_str: Quantity text, e.g. "7" or "+7"

    Returns:
        Integer quantity

    Raises:
        ValueError: If the text is not a whole number within range
    """
    if quantity_str is None or not quantity_str.strip():
        raise ValueError("Empty quantity string")

    quantity_str = quantity_str.strip()
    if not _QUANTITY_RE.fullmatch(quantity_str):
        raise ValueError(f"Could not parse quantity '{quantity_str}'")

    quantity = int(quantity_str)
    if quantity < 0:
        raise ValueError(f"Quantity cannot be negative: '{quantity_str}'")
    if quantity > MAX_QUANTITY:
        raise ValueError(f"Quantity out of range: '{quantity_str}'")
    return quantity
