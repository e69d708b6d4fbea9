"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class DecodeError(DomainError):
    """Imported item payload could not be decrypted or decoded."""


class StorageError(DomainError):
    """Underlying storage failed to read or persist data."""


class SharingDisabledError(DomainError):
    """Sharing or exporting items is turned off in settings."""


def item_not_found(item_id: int) -> str:
    """Return message for missing item by ID."""
    return f"Item {item_id} not found"


def item_name_not_found(name: str) -> str:
    """Return message for missing item by name."""
    return f"Item '{name}' not found"


def item_out_of_stock(name: str) -> str:
    """Return message when an item has no units left to sell."""
    return f"Item '{name}' is out of stock"


def sharing_disabled() -> str:
    """Return message when sharing is turned off."""
    return "Sharing is disabled in settings"
