"""Domain layer for stockpile application."""

from stockpile.domain.item import ItemService
from stockpile.domain.item_entry import ItemEntryModel
from stockpile.domain.item_export import ItemExportService
from stockpile.domain.item_import import ItemImportService
from stockpile.domain.settings import SettingsEditor, SettingsService

__all__ = [
    "ItemService",
    "ItemEntryModel",
    "ItemExportService",
    "ItemImportService",
    "SettingsService",
    "SettingsEditor",
]
