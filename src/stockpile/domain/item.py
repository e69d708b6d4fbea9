"""Item domain service."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from stockpile.domain.conversion import format_price
from stockpile.domain.entities import Item as ItemEntity, Settings
from stockpile.domain.errors import (
    NotFoundError,
    SharingDisabledError,
    ValidationError,
    item_not_found,
    item_out_of_stock,
    sharing_disabled,
)

if TYPE_CHECKING:
    from stockpile.database.base import Database

logger = logging.getLogger(__name__)

MASK = "********"


def mask_sensitive(value: str) -> str:
    """Hide a non-empty value."""
    return MASK if value else value


class ItemService:
    """Service for managing inventory items."""

    def __init__(self, db: Database):
        """Initialize item service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_item(self, item: ItemEntity) -> int:
        """Insert an item. The item's id is ignored; storage assigns a new one.

        Args:
            item: Item to insert

        Returns:
            Item ID

        Raises:
            StorageError: If the item cannot be persisted
        """
        item_id = self.db.create_item(item)
        logger.info("Created item '%s' (ID: %d)", item.name, item_id)
        return item_id

    def get_item(self, item_id: int) -> Optional[ItemEntity]:
        """Get item by ID.

        Args:
            item_id: Item ID

        Returns:
            Item entity or None if not found
        """
        return self.db.get_item(item_id)

    def require_item(self, item_id: int) -> ItemEntity:
        """Get item by ID or raise NotFoundError."""
        item = self.db.get_item(item_id)
        if item is None:
            raise NotFoundError(item_not_found(item_id))
        return item

    def get_item_by_name(self, name: str) -> Optional[ItemEntity]:
        """Get item by name."""
        return self.db.get_item_by_name(name)

    def item_exists(self, name: str) -> bool:
        """Check whether any item uses the given name."""
        return self.db.item_exists(name)

    def list_items(self) -> list[ItemEntity]:
        """List all items.

        Returns:
            List of item entities ordered by name
        """
        return self.db.list_items()

    def update_item(self, item: ItemEntity) -> None:
        """Replace a stored item with new field values.

        Raises:
            NotFoundError: If the item does not exist
        """
        self.db.update_item(item)
        logger.info("Updated item '%s' (ID: %d)", item.name, item.id)

    def delete_item(self, item_id: int) -> None:
        """Delete an item.

        Raises:
            NotFoundError: If the item does not exist
        """
        self.db.delete_item(item_id)
        logger.info("Deleted item %d", item_id)

    def sell_item(self, item_id: int) -> ItemEntity:
        """Reduce an item's quantity by one.

        Returns:
            The updated item

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If the item is out of stock
        """
        item = self.require_item(item_id)
        if item.quantity <= 0:
            raise ValidationError(item_out_of_stock(item.name))
        sold = replace(item, quantity=item.quantity - 1)
        self.db.update_item(sold)
        return sold

    def share_text(self, item: ItemEntity, settings: Settings) -> str:
        """Build a plain-text summary of an item for sharing.

        Raises:
            SharingDisabledError: If sharing is turned off
        """
        if settings.disable_sharing:
            raise SharingDisabledError(sharing_disabled())

        provider_email = item.provider_email
        provider_phone = item.provider_phone_number
        if settings.hide_sensitive_data:
            provider_email = mask_sensitive(provider_email)
            provider_phone = mask_sensitive(provider_phone)

        lines = [
            f"Item: {item.name}",
            f"Price: {format_price(item.price)}",
            f"Quantity in stock: {item.quantity}",
        ]
        if item.provider_name:
            lines.append(f"Provider: {item.provider_name}")
        if provider_email:
            lines.append(f"Provider email: {provider_email}")
        if provider_phone:
            lines.append(f"Provider phone: {provider_phone}")
        return "\n".join(lines)
