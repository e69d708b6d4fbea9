"""Item entry session state.

An ItemEntryModel holds the current entry snapshot and its validity flags.
Every update recomputes the flags synchronously before subscribers are
notified, so the most recent flags are always visible to save().
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from stockpile.domain.conversion import to_details, to_item
from stockpile.domain.entities import Item, ItemDetails, ItemEntryState, Settings
from stockpile.domain.item import ItemService
from stockpile.domain.settings import new_item_details
from stockpile.domain.validation import validate

logger = logging.getLogger(__name__)

Subscriber = Callable[[ItemEntryState], None]


def build_state(details: ItemDetails) -> ItemEntryState:
    """Validate details and wrap them in an entry state."""
    result = validate(details)
    return ItemEntryState(
        item_details=details,
        is_entry_valid=result.entry_valid,
        is_phone_valid=result.phone_valid,
        is_email_valid=result.email_valid,
    )


class ItemEntryModel:
    """Validates and saves a single item entry."""

    def __init__(self, item_service: ItemService, settings: Settings):
        self.item_service = item_service
        self.state = ItemEntryState(item_details=new_item_details(settings))
        self._subscribers: list[Subscriber] = []

    @classmethod
    def for_item(cls, item_service: ItemService, item: Item, settings: Optional[Settings] = None) -> "ItemEntryModel":
        """Start an edit session for an existing item."""
        model = cls(item_service, settings or Settings())
        model.update(to_details(item))
        return model

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback invoked with each new state.

        Returns:
            A function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def update(self, details: ItemDetails) -> ItemEntryState:
        """Replace the entry details and revalidate."""
        self.state = build_state(details)
        for callback in list(self._subscribers):
            callback(self.state)
        return self.state

    def save(self) -> Optional[Item]:
        """Persist the current entry if it is valid.

        New entries (id 0) are inserted, existing ones updated.

        Returns:
            The saved item, or None when the entry is invalid
        """
        details = self.state.item_details
        if not validate(details).entry_valid:
            logger.debug("Entry for '%s' is invalid, not saving", details.name)
            return None

        item = to_item(details)
        if item.id == 0:
            item_id = self.item_service.create_item(item)
            return replace(item, id=item_id)
        self.item_service.update_item(item)
        return item
