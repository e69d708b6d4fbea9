"""Item file export domain service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from stockpile.domain.entities import Item, Settings
from stockpile.domain.errors import SharingDisabledError, sharing_disabled
from stockpile.domain.item import ItemService
from stockpile.domain.item_codec import encode_item

if TYPE_CHECKING:
    from stockpile.database.base import Database
    from stockpile.security.item_file import ItemFileCipher

logger = logging.getLogger(__name__)


class ItemExportService:
    """Service for writing items to encrypted item files."""

    def __init__(self, db: Database, cipher: ItemFileCipher, settings: Settings):
        """Initialize export service.

        Args:
            db: Database instance
            cipher: Cipher used to seal item files
            settings: Current application settings
        """
        self.db = db
        self.cipher = cipher
        self.settings = settings
        self.item_service = ItemService(db)

    def export_item(self, item_id: int, file_path: str) -> Item:
        """Write one item to an encrypted item file.

        Returns:
            The exported item

        Raises:
            SharingDisabledError: If sharing is turned off
            NotFoundError: If the item does not exist
        """
        if self.settings.disable_sharing:
            raise SharingDisabledError(sharing_disabled())

        item = self.item_service.require_item(item_id)
        self.cipher.write_file(Path(file_path), encode_item(item))
        logger.info("Exported item '%s' to %s", item.name, file_path)
        return item
