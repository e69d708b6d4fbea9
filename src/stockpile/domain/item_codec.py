"""JSON codec for item file payloads.

Payloads are JSON objects using camelCase keys::

    {"id": 3, "name": "Widget", "price": 2.5, "quantity": 10,
     "providerName": "Acme", "providerEmail": "a@acme.com",
     "providerPhoneNumber": "81234567890", "sourceType": "Manual"}

The id and source type are informational only and are ignored on decode.
"""

import json
import math
from decimal import Decimal, InvalidOperation
from typing import Any

from stockpile.domain.entities import Item, ItemRecord
from stockpile.domain.errors import DecodeError
from stockpile.utils.number_parser import MAX_PRICE_EXPONENT, MAX_QUANTITY

_TEXT_FIELDS = {
    "provider_name": ("providerName", "provider_name"),
    "provider_email": ("providerEmail", "provider_email"),
    "provider_phone_number": ("providerPhoneNumber", "provider_phone_number"),
}


def _lookup(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _decode_price(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Field 'price' must be a number, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise DecodeError(f"Field 'price' must be finite, got {value!r}")
    try:
        price = Decimal(str(value))
    except InvalidOperation as e:
        raise DecodeError(f"Field 'price' is not a valid number: {value!r}") from e
    if price < 0:
        raise DecodeError(f"Field 'price' cannot be negative, got {value!r}")
    if price and price.adjusted() > MAX_PRICE_EXPONENT:
        raise DecodeError(f"Field 'price' is out of range, got {price:.3E}")
    return price


def _decode_quantity(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field 'quantity' must be an integer, got {value!r}")
    if value < 0:
        raise DecodeError(f"Field 'quantity' cannot be negative, got {value!r}")
    if value > MAX_QUANTITY:
        raise DecodeError(f"Field 'quantity' is out of range, got {value!r}")
    return value


def decode_item_record(payload: bytes) -> ItemRecord:
    """Decode a decrypted item file payload.

    Args:
        payload: UTF-8 JSON bytes

    Returns:
        ItemRecord with missing numeric fields defaulting to zero and
        missing provider fields defaulting to ""

    Raises:
        DecodeError: If the payload is not a well-formed item object
    """
    try:
        data = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Item file is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError("Item file must contain a JSON object")

    name = data.get("name")
    if not isinstance(name, str):
        raise DecodeError("Item file is missing a text 'name' field")

    text_values = {}
    for field_name, keys in _TEXT_FIELDS.items():
        value = _lookup(data, keys)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise DecodeError(f"Field '{keys[0]}' must be text, got {value!r}")
        text_values[field_name] = value

    return ItemRecord(
        name=name,
        price=_decode_price(data.get("price")),
        quantity=_decode_quantity(data.get("quantity")),
        **text_values,
    )


def encode_item(item: Item) -> bytes:
    """Encode an item as an item file payload."""
    data = {
        "id": item.id,
        "name": item.name,
        "price": float(item.price),
        "quantity": item.quantity,
        "providerName": item.provider_name,
        "providerEmail": item.provider_email,
        "providerPhoneNumber": item.provider_phone_number,
        "sourceType": item.source_type.value,
    }
    return json.dumps(data, ensure_ascii=False).encode("utf-8")
