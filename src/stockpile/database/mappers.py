"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from stockpile.domain import entities as domain
from stockpile.database.models import Item as ORMItem


def item_to_domain(orm_item: ORMItem) -> domain.Item:
    """Convert SQLAlchemy Item model to domain Item entity."""
    return domain.Item(
        id=orm_item.id,
        name=orm_item.name,
        price=Decimal(orm_item.price) if orm_item.price is not None else Decimal("0"),
        quantity=orm_item.quantity or 0,
        provider_name=orm_item.provider_name or "",
        provider_email=orm_item.provider_email or "",
        provider_phone_number=orm_item.provider_phone_number or "",
        source_type=domain.SourceType(orm_item.source_type or domain.SourceType.MANUAL.value),
    )


def apply_item_fields(orm_item: ORMItem, item: domain.Item) -> ORMItem:
    """Copy domain Item fields (except id) onto a SQLAlchemy Item model."""
    orm_item.name = item.name
    orm_item.price = item.price
    orm_item.quantity = item.quantity
    orm_item.provider_name = item.provider_name
    orm_item.provider_email = item.provider_email
    orm_item.provider_phone_number = item.provider_phone_number
    orm_item.source_type = domain.SourceType(item.source_type).value
    return orm_item
