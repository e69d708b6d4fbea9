"""SQLAlchemy models for stockpile database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Item(Base):
    """Inventory item model."""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    # Not unique: manual entry may repeat names, import resolves collisions
    name = Column(String, nullable=False, index=True)
    price = Column(Numeric(12, 2), nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=0)
    provider_name = Column(String, nullable=False, default="")
    provider_email = Column(String, nullable=False, default="")
    provider_phone_number = Column(String, nullable=False, default="")
    source_type = Column(String, nullable=False, default="Manual")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Setting(Base):
    """Key/value application setting."""

    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
