"""Item entry validation.

Validation never raises: each rule reports a boolean flag so the caller can
decide whether an entry may be saved.
"""

import re

from stockpile.domain.entities import ItemDetails, ValidationResult

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"8[0-9]{10}")


def is_blank(value: str) -> bool:
    """Return True for empty or whitespace-only text."""
    return not value or value.isspace()


def validate_phone(phone_number: str) -> bool:
    """Check a provider phone number.

    Empty is allowed; otherwise the number must be the digit 8 followed by
    exactly ten digits, without separators or a leading "+".
    """
    if is_blank(phone_number):
        return True
    return PHONE_PATTERN.fullmatch(phone_number) is not None


def validate_email(email: str) -> bool:
    """Check a provider email address. Empty is allowed."""
    if is_blank(email):
        return True
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate(details: ItemDetails) -> ValidationResult:
    """Compute all validity flags for an item entry.

    Args:
        details: Current entry snapshot

    Returns:
        ValidationResult with entry, phone and email flags
    """
    phone_valid = validate_phone(details.provider_phone_number)
    email_valid = validate_email(details.provider_email)
    entry_valid = (
        not is_blank(details.name)
        and not is_blank(details.price)
        and not is_blank(details.quantity)
        and phone_valid
        and email_valid
    )
    return ValidationResult(
        entry_valid=entry_valid,
        phone_valid=phone_valid,
        email_valid=email_valid,
    )


def validate_entry(details: ItemDetails) -> bool:
    """Return True when the entry may be persisted."""
    return validate(details).entry_valid
