"""Shared pytest fixtures for stockpile tests."""

import tempfile
import os
from decimal import Decimal
import pytest
from cryptography.fernet import Fernet

from stockpile.database.factories import create_sqlite_database
from stockpile.domain.entities import Item, SourceType
from stockpile.domain.item import ItemService
from stockpile.domain.settings import SettingsService
from stockpile.security.item_file import ItemFileCipher


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def fresh_db(temp_db):
    """Open a second connection to the temporary database.

    Used to observe changes made by CLI invocations without reusing the
    session of temp_db.
    """
    def _open():
        return create_sqlite_database(database_path=temp_db.database_path)

    return _open


@pytest.fixture
def item_service(temp_db):
    """Create an ItemService with a temporary database."""
    return ItemService(temp_db)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService with a temporary database."""
    return SettingsService(temp_db)


@pytest.fixture
def key_file(tmp_path):
    """Write a fresh item file key and return its path."""
    path = tmp_path / "item.key"
    path.write_bytes(Fernet.generate_key())
    return path


@pytest.fixture
def cipher(key_file):
    """Create an ItemFileCipher using the temporary key."""
    return ItemFileCipher(key_file.read_bytes())


@pytest.fixture
def sample_item(item_service):
    """Create a sample item for testing."""
    item_id = item_service.create_item(
        Item(
            id=0,
            name="Widget",
            price=Decimal("2.50"),
            quantity=10,
            provider_name="Acme",
            provider_email="sales@acme.com",
            provider_phone_number="81234567890",
            source_type=SourceType.MANUAL,
        )
    )
    return item_service.get_item(item_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db, key_file):
    """Return global CLI arguments pointing at the temporary database and key."""
    return ["--db-path", temp_db.database_path, "--key-file", str(key_file)]
