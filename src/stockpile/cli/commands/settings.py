"""Settings commands."""

import click
from stockpile.cli.error_handling import handle_domain_error
from stockpile.domain.errors import DomainError
from stockpile.domain.settings import SettingsEditor
from stockpile.domain.validation import validate_email, validate_phone


def _on_off(value: bool) -> str:
    return "on" if value else "off"


@click.group()
def settings_group():
    """Manage application settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show current settings."""
    settings = ctx.obj["settings_service"].settings

    click.echo("Default provider:")
    click.echo(f"  Name: {settings.provider_name}")
    click.echo(f"  Email: {settings.provider_email}")
    click.echo(f"  Phone: {settings.provider_phone_number}")
    click.echo(f"Use default fields: {_on_off(settings.enable_default_fields)}")
    click.echo(f"Hide sensitive data: {_on_off(settings.hide_sensitive_data)}")
    click.echo(f"Disable sharing: {_on_off(settings.disable_sharing)}")


@settings_group.command("set")
@click.option("--provider-name", help="Default provider name")
@click.option("--provider-email", help="Default provider email")
@click.option("--provider-phone", help="Default provider phone")
@click.option(
    "--enable-default-fields/--disable-default-fields",
    default=None,
    help="Pre-fill provider fields of new items with the defaults",
)
@click.option(
    "--hide-sensitive-data/--show-sensitive-data",
    default=None,
    help="Mask provider contact details when showing or sharing items",
)
@click.option(
    "--disable-sharing/--enable-sharing",
    default=None,
    help="Refuse to share or export items",
)
@click.pass_context
def set_settings(
    ctx,
    provider_name: str | None,
    provider_email: str | None,
    provider_phone: str | None,
    enable_default_fields: bool | None,
    hide_sensitive_data: bool | None,
    disable_sharing: bool | None,
):
    """Change settings. Options that are not given keep their value.

    Examples:
        stockpile settings set --provider-name "Acme" --enable-default-fields
        stockpile settings set --hide-sensitive-data --disable-sharing
    """
    editor = SettingsEditor(ctx.obj["settings_service"])
    editor.init_state()

    if provider_name is not None:
        editor.on_name_change(provider_name)
    if provider_email is not None:
        if not validate_email(provider_email):
            click.echo(f"Error: Provider email '{provider_email}' is not a valid address", err=True)
            ctx.exit(1)
        editor.on_email_change(provider_email)
    if provider_phone is not None:
        if not validate_phone(provider_phone):
            click.echo(
                f"Error: Provider phone '{provider_phone}' must be 8 followed by 10 digits", err=True
            )
            ctx.exit(1)
        editor.on_phone_change(provider_phone)
    if enable_default_fields is not None:
        editor.on_enable_default_fields_change(enable_default_fields)
    if hide_sensitive_data is not None:
        editor.on_hide_sensitive_data_change(hide_sensitive_data)
    if disable_sharing is not None:
        editor.on_disable_sharing_change(disable_sharing)

    try:
        editor.save()
        click.echo("Settings saved")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
