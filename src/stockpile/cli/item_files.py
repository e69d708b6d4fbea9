"""CLI helpers for opening the item file cipher."""

from pathlib import Path

import click
from stockpile.security.item_file import ItemFileCipher, load_or_create_key


def cipher_or_exit(ctx: click.Context) -> ItemFileCipher:
    """Build the item file cipher from --key-file, or exit with a CLI error."""
    key_file = ctx.obj.get("key_file")
    try:
        key = load_or_create_key(Path(key_file) if key_file else None)
        return ItemFileCipher(key)
    except (OSError, ValueError) as e:
        click.echo(f"Error: Could not load item file key: {e}", err=True)
        ctx.exit(1)
