"""
Unit tests for JsonItemRepository.

Usage:
    pytest vigie/tests/unit/infrastructure/test_json_item_repository.py
"""

import pytest

from vigie.domain.exceptions import DataSourceError
from vigie.infrastructure.data import JsonItemRepository


class TestJsonItemRepository:
    """Unit tests for JsonItemRepository."""

    def test_load_items(self, items_file):
        """Test items are read from the JSON array."""
        items = JsonItemRepository(items_file).load_items()

        assert len(items) == 3
        assert items[0]["name"] == "Laptop Pro"

    def test_reads_file_on_every_call(self, tmp_path):
        """Test edits are visible without re-creating the repository."""
        path = tmp_path / "items.json"
        path.write_text("[]", encoding="utf-8")
        repository = JsonItemRepository(path)

        assert repository.load_items() == []

        path.write_text('[{"id": 1}]', encoding="utf-8")
        assert repository.load_items() == [{"id": 1}]

    def test_missing_file(self, tmp_path):
        """Test missing file raises DataSourceError."""
        with pytest.raises(DataSourceError):
            JsonItemRepository(tmp_path / "nope.json").load_items()

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises DataSourceError."""
        path = tmp_path / "items.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataSourceError) as exc_info:
            JsonItemRepository(path).load_items()

        assert "invalid JSON" in exc_info.value.message

    def test_non_array(self, tmp_path):
        """Test a JSON object is rejected."""
        path = tmp_path / "items.json"
        path.write_text('{"items": []}', encoding="utf-8")

        with pytest.raises(DataSourceError):
            JsonItemRepository(path).load_items()

    def test_invalid_utf8(self, tmp_path):
        """Test bytes that are not UTF-8 raise DataSourceError."""
        path = tmp_path / "items.json"
        path.write_bytes(b'[{"id": 1, "name": "\xff\xfe bad"}]')

        with pytest.raises(DataSourceError) as exc_info:
            JsonItemRepository(path).load_items()

        assert "not UTF-8" in exc_info.value.message
