"""Tests for item import name resolution and the import service."""

import json
import pytest
from decimal import Decimal

from stockpile.domain.entities import ItemRecord, SourceType
from stockpile.domain.errors import DecodeError, StorageError
from stockpile.domain.item_import import (
    ItemImportService,
    build_import_item,
    resolve_unique_name,
)


class TestResolveUniqueName:
    """Tests for resolve_unique_name."""

    def test_no_collision_returns_name_unchanged(self):
        assert resolve_unique_name("Widget", lambda name: False) == "Widget"

    def test_skips_taken_suffixes(self):
        existing = {"Widget", "Widget (1)"}
        assert resolve_unique_name("Widget", existing.__contains__) == "Widget (2)"

    def test_first_suffix_is_one(self):
        assert resolve_unique_name("Widget", {"Widget"}.__contains__) == "Widget (1)"

    def test_suffix_is_applied_to_original_name(self):
        existing = {"Widget", "Widget (1)", "Widget (2)", "Widget (3)"}
        assert resolve_unique_name("Widget", existing.__contains__) == "Widget (4)"

    def test_gap_in_suffixes_is_filled(self):
        existing = {"Widget", "Widget (2)"}
        assert resolve_unique_name("Widget", existing.__contains__) == "Widget (1)"

    def test_candidates_checked_in_order(self):
        checked = []

        def exists(name):
            checked.append(name)
            return len(checked) < 3

        resolve_unique_name("Bolt", exists)
        assert checked == ["Bolt", "Bolt (1)", "Bolt (2)"]


class TestBuildImportItem:
    """Tests for build_import_item."""

    def test_builds_file_item_with_reset_id(self):
        record = ItemRecord(
            name="Widget",
            price=Decimal("2.5"),
            quantity=3,
            provider_name="Acme",
            provider_email="bad email",
            provider_phone_number="123",
        )
        item = build_import_item(record, {"Widget"}.__contains__)

        assert item.id == 0
        assert item.name == "Widget (1)"
        assert item.price == Decimal("2.5")
        assert item.quantity == 3
        assert item.provider_name == "Acme"
        assert item.provider_email == "bad email"
        assert item.provider_phone_number == "123"
        assert item.source_type == SourceType.FILE


class TestItemImportService:
    """Tests for ItemImportService against a real database."""

    def test_import_record_inserts_item(self, temp_db, cipher):
        service = ItemImportService(temp_db, cipher)
        item = service.import_record(ItemRecord(name="Widget", price=Decimal("1.25"), quantity=2))

        assert item.id > 0
        stored = temp_db.get_item(item.id)
        assert stored.name == "Widget"
        assert stored.source_type == SourceType.FILE
        assert stored.price == Decimal("1.25")

    def test_import_record_renames_on_collision(self, temp_db, cipher, sample_item):
        service = ItemImportService(temp_db, cipher)
        first = service.import_record(ItemRecord(name="Widget"))
        second = service.import_record(ItemRecord(name="Widget"))

        assert first.name == "Widget (1)"
        assert second.name == "Widget (2)"
        assert len(temp_db.list_items()) == 3

    def test_import_file(self, temp_db, cipher, tmp_path):
        path = tmp_path / "widget.item"
        cipher.write_file(
            path, json.dumps({"id": 42, "name": "Widget", "price": 3, "quantity": 5}).encode()
        )
        service = ItemImportService(temp_db, cipher)

        item = service.import_file(str(path))

        assert item.id != 42
        assert item.name == "Widget"
        assert item.quantity == 5
        assert item.source_type == SourceType.FILE

    def test_import_file_with_wrong_key_inserts_nothing(self, temp_db, cipher, tmp_path):
        from cryptography.fernet import Fernet
        from stockpile.security.item_file import ItemFileCipher

        path = tmp_path / "widget.item"
        ItemFileCipher(Fernet.generate_key()).write_file(path, b'{"name": "Widget"}')
        service = ItemImportService(temp_db, cipher)

        with pytest.raises(DecodeError):
            service.import_file(str(path))
        assert temp_db.list_items() == []

    def test_import_file_malformed_payload_inserts_nothing(self, temp_db, cipher, tmp_path):
        path = tmp_path / "broken.item"
        cipher.write_file(path, b"{not json")
        service = ItemImportService(temp_db, cipher)

        with pytest.raises(DecodeError):
            service.import_file(str(path))
        assert temp_db.list_items() == []

    @pytest.mark.parametrize("price", [b"1e15", b"1" + b"0" * 400])
    def test_import_file_huge_price_inserts_nothing(self, temp_db, cipher, tmp_path, price):
        path = tmp_path / "huge.item"
        cipher.write_file(path, b'{"name": "Widget", "quantity": 1, "price": ' + price + b"}")
        service = ItemImportService(temp_db, cipher)

        with pytest.raises(DecodeError):
            service.import_file(str(path))
        assert temp_db.list_items() == []

    def test_import_missing_file(self, temp_db, cipher, tmp_path):
        service = ItemImportService(temp_db, cipher)
        with pytest.raises(FileNotFoundError):
            service.import_file(str(tmp_path / "missing.item"))

    def test_storage_failure_is_propagated(self, temp_db, cipher, monkeypatch):
        service = ItemImportService(temp_db, cipher)

        def broken_exists(name):
            raise StorageError("database unavailable")

        monkeypatch.setattr(temp_db, "item_exists", broken_exists)
        with pytest.raises(StorageError):
            service.import_record(ItemRecord(name="Widget"))
