"""CLI helpers for item resolution and error handling."""

from __future__ import annotations

import click
from stockpile.domain.item import ItemService
from stockpile.domain.errors import NotFoundError
from stockpile.utils.item_resolver import resolve_item
from stockpile.cli.error_handling import handle_domain_error


def resolve_item_or_exit(ctx: click.Context, item_service: ItemService, item: str | int) -> int:
    """Resolve item name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_item(item_service, item)
    except NotFoundError as exc:
        handle_domain_error(ctx, exc)
