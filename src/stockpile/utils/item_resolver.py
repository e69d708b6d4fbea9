"""Utility for resolving item names to IDs."""

from stockpile.domain.errors import NotFoundError, item_name_not_found, item_not_found
from stockpile.domain.item import ItemService


def resolve_item(item_service: ItemService, item: str | int) -> int:
    """Resolve item name or ID to item ID.

    Args:
        item_service: ItemService instance
        item: Item name (str) or ID (int or string representation of int)

    Returns:
        Item ID

    Raises:
        NotFoundError: If item is not found
    """
    # If it's already an integer, use it as ID
    if isinstance(item, int):
        if item_service.get_item(item) is None:
            raise NotFoundError(item_not_found(item))
        return item

    # Names take precedence so an item called "42" stays reachable
    item_obj = item_service.get_item_by_name(item)
    if item_obj is not None:
        return item_obj.id

    try:
        item_id = int(item)
    except (ValueError, TypeError):
        raise NotFoundError(item_name_not_found(item))

    if item_service.get_item(item_id) is None:
        raise NotFoundError(item_not_found(item_id))
    return item_id
