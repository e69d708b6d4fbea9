"""Item file import domain service.

Imported items keep their name where possible. When the name is already
taken, a " (n)" suffix is appended with n counting up from 1 until a free
name is found. The name lookup and the insert are separate storage calls,
so two imports running against the same database at once can still
produce duplicate names.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from stockpile.domain.entities import Item, ItemRecord, SourceType
from stockpile.domain.item import ItemService
from stockpile.domain.item_codec import decode_item_record

if TYPE_CHECKING:
    from stockpile.database.base import Database
    from stockpile.security.item_file import ItemFileCipher

logger = logging.getLogger(__name__)


def resolve_unique_name(name: str, exists_by_name: Callable[[str], bool]) -> str:
    """Find the first name in "name", "name (1)", "name (2)", ... not in use.

    Args:
        name: Requested name
        exists_by_name: Predicate reporting whether a name is taken

    Returns:
        A name for which exists_by_name returned False
    """
    candidate = name
    counter = 1
    while exists_by_name(candidate):
        logger.debug("Item name '%s' is taken", candidate)
        candidate = f"{name} ({counter})"
        counter += 1
    return candidate


def build_import_item(record: ItemRecord, exists_by_name: Callable[[str], bool]) -> Item:
    """Turn a decoded record into an item ready for insertion.

    The result has id 0 so storage assigns a fresh one, a collision-free
    name, and source type FILE. No entry validation is applied.
    """
    return Item(
        id=0,
        name=resolve_unique_name(record.name, exists_by_name),
        price=record.price,
        quantity=record.quantity,
        provider_name=record.provider_name,
        provider_email=record.provider_email,
        provider_phone_number=record.provider_phone_number,
        source_type=SourceType.FILE,
    )


class ItemImportService:
    """Service for importing items from encrypted item files."""

    def __init__(self, db: Database, cipher: ItemFileCipher):
        """Initialize import service.

        Args:
            db: Database instance
            cipher: Cipher used to open item files
        """
        self.db = db
        self.cipher = cipher
        self.item_service = ItemService(db)

    def import_record(self, record: ItemRecord) -> Item:
        """Resolve the record's name and insert it.

        Returns:
            The inserted item, carrying its new ID

        Raises:
            StorageError: If the name check or insert fails
        """
        item = build_import_item(record, self.item_service.item_exists)
        if item.name != record.name:
            logger.info("Renamed imported item '%s' to '%s'", record.name, item.name)
        item_id = self.item_service.create_item(item)
        return replace(item, id=item_id)

    def import_file(self, file_path: str) -> Item:
        """Import a single item from an encrypted item file.

        Args:
            file_path: Path to the item file

        Returns:
            The inserted item

        Raises:
            FileNotFoundError: If the file doesn't exist
            DecodeError: If the file cannot be decrypted or decoded
            StorageError: If the name check or insert fails
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Item file not found: {file_path}")

        payload = self.cipher.read_file(path)
        record = decode_item_record(payload)
        logger.info("Importing item '%s' from %s", record.name, path)
        return self.import_record(record)
