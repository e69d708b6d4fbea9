"""Tests for settings commands."""

from stockpile.cli.main import cli
from stockpile.domain.settings import SettingsService


def test_settings_show_defaults(cli_runner, cli_args):
    result = cli_runner.invoke(cli, cli_args + ["settings", "show"])

    assert result.exit_code == 0
    assert "Use default fields: off" in result.output
    assert "Disable sharing: off" in result.output


def test_settings_set(cli_runner, cli_args, fresh_db):
    result = cli_runner.invoke(
        cli,
        cli_args
        + [
            "settings",
            "set",
            "--provider-name",
            "Acme",
            "--provider-phone",
            "81234567890",
            "--enable-default-fields",
            "--hide-sensitive-data",
        ],
    )

    assert result.exit_code == 0
    assert "Settings saved" in result.output
    settings = SettingsService(fresh_db()).load()
    assert settings.provider_name == "Acme"
    assert settings.provider_phone_number == "81234567890"
    assert settings.enable_default_fields is True
    assert settings.hide_sensitive_data is True
    assert settings.disable_sharing is False


def test_settings_set_keeps_unspecified(cli_runner, cli_args, fresh_db):
    cli_runner.invoke(cli, cli_args + ["settings", "set", "--provider-name", "Acme", "--disable-sharing"])
    result = cli_runner.invoke(cli, cli_args + ["settings", "set", "--enable-sharing"])

    assert result.exit_code == 0
    settings = SettingsService(fresh_db()).load()
    assert settings.provider_name == "Acme"
    assert settings.disable_sharing is False


def test_settings_set_invalid_phone(cli_runner, cli_args, fresh_db):
    result = cli_runner.invoke(cli, cli_args + ["settings", "set", "--provider-phone", "12345"])

    assert result.exit_code == 1
    assert "must be 8 followed by 10 digits" in result.output
    assert SettingsService(fresh_db()).load().provider_phone_number == ""


def test_help_does_not_open_database(cli_runner, tmp_path):
    db_path = tmp_path / "never.db"
    result = cli_runner.invoke(cli, ["--db-path", str(db_path), "--help"])

    assert result.exit_code == 0
    assert "Stockpile" in result.output
    assert not db_path.exists()
