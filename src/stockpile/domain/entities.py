"""Domain model entities for stockpile.

These are pure data classes representing inventory concepts, independent of
database schema. Persisted entities are frozen; entry snapshots are plain
mutable data classes that are replaced as the user edits them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class SourceType(str, Enum):
    """Provenance of an item."""

    MANUAL = "Manual"
    FILE = "File"


@dataclass(frozen=True)
class Item:
    """Persisted inventory item."""

    id: int
    name: str
    price: Decimal
    quantity: int
    provider_name: str = ""
    provider_email: str = ""
    provider_phone_number: str = ""
    source_type: SourceType = SourceType.MANUAL


@dataclass
class ItemDetails:
    """In-progress item entry with numeric fields kept as raw text."""

    id: int = 0
    name: str = ""
    price: str = ""
    quantity: str = ""
    provider_name: str = ""
    provider_email: str = ""
    provider_phone_number: str = ""
    source_type: SourceType = SourceType.MANUAL


@dataclass(frozen=True)
class ItemRecord:
    """Item decoded from an external file, before name resolution."""

    name: str
    price: Decimal = Decimal("0")
    quantity: int = 0
    provider_name: str = ""
    provider_email: str = ""
    provider_phone_number: str = ""


@dataclass(frozen=True)
class ValidationResult:
    """Validity flags for an item entry."""

    entry_valid: bool
    phone_valid: bool
    email_valid: bool


@dataclass(frozen=True)
class ItemEntryState:
    """Snapshot of an entry session: current details plus their validity."""

    item_details: ItemDetails = field(default_factory=ItemDetails)
    is_entry_valid: bool = False
    is_phone_valid: bool = True
    is_email_valid: bool = True


@dataclass(frozen=True)
class Settings:
    """Application settings entity."""

    provider_name: str = ""
    provider_email: str = ""
    provider_phone_number: str = ""
    enable_default_fields: bool = False
    hide_sensitive_data: bool = False
    disable_sharing: bool = False
