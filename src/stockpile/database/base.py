"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from stockpile.domain.entities import Item


class Database(ABC):
    """Abstract database interface for stockpile.

    Implementations raise StorageError when the underlying store fails.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Item operations
    @abstractmethod
    def create_item(self, item: Item) -> int:
        """Insert an item, ignoring its id. Returns the new item ID."""
        pass

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[Item]:
        """Get item by ID."""
        pass

    @abstractmethod
    def get_item_by_name(self, name: str) -> Optional[Item]:
        """Get the first item with the given name."""
        pass

    @abstractmethod
    def item_exists(self, name: str) -> bool:
        """Check if an item with the given name exists."""
        pass

    @abstractmethod
    def list_items(self) -> list[Item]:
        """List all items ordered by name."""
        pass

    @abstractmethod
    def update_item(self, item: Item) -> None:
        """Replace all fields of an existing item."""
        pass

    @abstractmethod
    def delete_item(self, item_id: int) -> None:
        """Delete an item."""
        pass

    # Settings operations
    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """Get a raw setting value, or None when unset."""
        pass

    @abstractmethod
    def set_setting(self, key: str, value: str) -> None:
        """Store a raw setting value."""
        pass
