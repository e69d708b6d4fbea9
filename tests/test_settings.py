"""Tests for settings service and editor."""

from stockpile.domain.entities import ItemDetails, Settings
from stockpile.domain.settings import SettingsEditor, SettingsService, new_item_details


def test_defaults_when_nothing_stored(settings_service):
    settings = settings_service.load()

    assert settings == Settings()
    assert settings_service.default_provider_name == ""
    assert settings_service.enable_default_fields is False
    assert settings_service.hide_sensitive_data is False
    assert settings_service.disable_sharing is False


def test_save_and_reload(temp_db, settings_service):
    saved = Settings(
        provider_name="Acme",
        provider_email="a@acme.com",
        provider_phone_number="81234567890",
        enable_default_fields=True,
        hide_sensitive_data=True,
        disable_sharing=False,
    )
    settings_service.save(saved)

    assert settings_service.settings == saved
    assert SettingsService(temp_db).load() == saved
    assert temp_db.get_setting("default_shipper_name") == "Acme"
    assert temp_db.get_setting("enable_def_fields") == "true"


def test_settings_loaded_once(temp_db, settings_service):
    assert settings_service.settings.provider_name == ""
    temp_db.set_setting("default_shipper_name", "Changed elsewhere")

    assert settings_service.settings.provider_name == ""
    assert settings_service.load().provider_name == "Changed elsewhere"


def test_new_item_details_scenario():
    settings = Settings(
        provider_name="Acme",
        provider_phone_number="81234567890",
        provider_email="a@acme.com",
        enable_default_fields=True,
    )
    details = new_item_details(settings)

    assert details.provider_name == "Acme"
    assert details.provider_phone_number == "81234567890"
    assert details.provider_email == "a@acme.com"
    assert details.name == ""
    assert details.id == 0


def test_new_item_details_without_defaults():
    assert new_item_details(Settings(provider_name="Acme")) == ItemDetails()


def test_editor_changes_are_saved_explicitly(temp_db, settings_service):
    editor = SettingsEditor(settings_service)
    editor.init_state()
    editor.on_name_change("Acme")
    editor.on_phone_change("81234567890")
    editor.on_email_change("a@acme.com")
    editor.on_enable_default_fields_change(True)
    editor.on_hide_sensitive_data_change(True)
    editor.on_disable_sharing_change(True)

    assert SettingsService(temp_db).load() == Settings()

    editor.save()

    assert SettingsService(temp_db).load() == Settings(
        provider_name="Acme",
        provider_email="a@acme.com",
        provider_phone_number="81234567890",
        enable_default_fields=True,
        hide_sensitive_data=True,
        disable_sharing=True,
    )


def test_editor_init_state_reads_stored_settings(settings_service):
    settings_service.save(Settings(provider_name="Acme", disable_sharing=True))
    editor = SettingsEditor(settings_service)

    state = editor.init_state()

    assert state.provider_name == "Acme"
    assert state.disable_sharing is True
