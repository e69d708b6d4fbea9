"""Settings domain service.

Settings are loaded once per process and passed by reference to whatever
builds entry sessions or edits settings.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from stockpile.domain.entities import ItemDetails, Settings, SourceType

if TYPE_CHECKING:
    from stockpile.database.base import Database

logger = logging.getLogger(__name__)

DEF_NAME_KEY = "default_shipper_name"
DEF_PHONE_KEY = "default_shipper_phone"
DEF_EMAIL_KEY = "default_shipper_email"
ENABLE_DEF_FIELDS_KEY = "enable_def_fields"
HIDE_SENSITIVE_DATA_KEY = "hide_sensitive_data"
DISABLE_SHARING_KEY = "disable_sharing"

_TRUE = "true"
_FALSE = "false"


class SettingsService:
    """Service for reading and saving application settings."""

    def __init__(self, db: Database):
        """Initialize settings service.

        Args:
            db: Database instance
        """
        self.db = db
        self._settings: Optional[Settings] = None

    def _get_str(self, key: str) -> str:
        value = self.db.get_setting(key)
        return value if value is not None else ""

    def _get_bool(self, key: str) -> bool:
        return self.db.get_setting(key) == _TRUE

    def load(self) -> Settings:
        """Read all settings from storage and cache them."""
        self._settings = Settings(
            provider_name=self._get_str(DEF_NAME_KEY),
            provider_email=self._get_str(DEF_EMAIL_KEY),
            provider_phone_number=self._get_str(DEF_PHONE_KEY),
            enable_default_fields=self._get_bool(ENABLE_DEF_FIELDS_KEY),
            hide_sensitive_data=self._get_bool(HIDE_SENSITIVE_DATA_KEY),
            disable_sharing=self._get_bool(DISABLE_SHARING_KEY),
        )
        return self._settings

    @property
    def settings(self) -> Settings:
        """Current settings, loaded on first access."""
        if self._settings is None:
            return self.load()
        return self._settings

    @property
    def default_provider_name(self) -> str:
        """Provider name pre-filled into new items."""
        return self.settings.provider_name

    @property
    def default_provider_email(self) -> str:
        """Provider email pre-filled into new items."""
        return self.settings.provider_email

    @property
    def default_provider_phone_number(self) -> str:
        """Provider phone number pre-filled into new items."""
        return self.settings.provider_phone_number

    @property
    def enable_default_fields(self) -> bool:
        """Whether new items start with the default provider fields."""
        return self.settings.enable_default_fields

    @property
    def hide_sensitive_data(self) -> bool:
        """Whether provider contact details are masked when shown or shared."""
        return self.settings.hide_sensitive_data

    @property
    def disable_sharing(self) -> bool:
        """Whether sharing and exporting items is refused."""
        return self.settings.disable_sharing

    def save(self, settings: Settings) -> None:
        """Persist all settings and refresh the cached copy.

        Args:
            settings: Settings to store
        """
        self.db.set_setting(DEF_NAME_KEY, settings.provider_name)
        self.db.set_setting(DEF_PHONE_KEY, settings.provider_phone_number)
        self.db.set_setting(DEF_EMAIL_KEY, settings.provider_email)
        self.db.set_setting(ENABLE_DEF_FIELDS_KEY, _TRUE if settings.enable_default_fields else _FALSE)
        self.db.set_setting(HIDE_SENSITIVE_DATA_KEY, _TRUE if settings.hide_sensitive_data else _FALSE)
        self.db.set_setting(DISABLE_SHARING_KEY, _TRUE if settings.disable_sharing else _FALSE)
        self._settings = settings
        logger.info("Settings saved")


def new_item_details(settings: Settings) -> ItemDetails:
    """Create a fresh entry snapshot, seeded with default provider fields if enabled."""
    if not settings.enable_default_fields:
        return ItemDetails()
    return ItemDetails(
        provider_name=settings.provider_name,
        provider_email=settings.provider_email,
        provider_phone_number=settings.provider_phone_number,
        source_type=SourceType.MANUAL,
    )


class SettingsEditor:
    """Holds settings being edited until they are explicitly saved."""

    def __init__(self, service: SettingsService):
        self.service = service
        self.state = Settings()

    def init_state(self) -> Settings:
        """Reset the edited state to the stored settings."""
        self.state = self.service.settings
        return self.state

    def on_name_change(self, value: str) -> None:
        self.state = replace(self.state, provider_name=value)

    def on_phone_change(self, value: str) -> None:
        self.state = replace(self.state, provider_phone_number=value)

    def on_email_change(self, value: str) -> None:
        self.state = replace(self.state, provider_email=value)

    def on_enable_default_fields_change(self, value: bool) -> None:
        self.state = replace(self.state, enable_default_fields=value)

    def on_hide_sensitive_data_change(self, value: bool) -> None:
        self.state = replace(self.state, hide_sensitive_data=value)

    def on_disable_sharing_change(self, value: bool) -> None:
        self.state = replace(self.state, disable_sharing=value)

    def save(self) -> None:
        """Store the edited state."""
        self.service.save(self.state)
