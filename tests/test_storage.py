"""
Unit tests for client key-value storage.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from apps.frontend.storage import STATE_FILE_NAME, JsonFileStorage, MemoryStorage


class TestMemoryStorage:
    def test_set_get_remove(self) -> None:
        storage = MemoryStorage()
        assert storage.get_item("k") is None
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        storage.remove_item("k")
        storage.remove_item("k")
        assert storage.get_item("k") is None


class TestJsonFileStorage:
    def test_missing_file_reads_empty(self, file_storage: JsonFileStorage) -> None:
        assert file_storage.get_item("anything") is None
        assert not file_storage.path.exists()

    def test_values_survive_new_instance(self, tmp_path: Path) -> None:
        JsonFileStorage.in_directory(tmp_path).set_item("lastVisitedRoute", "/cards")
        assert JsonFileStorage.in_directory(tmp_path).get_item("lastVisitedRoute") == "/cards"

    def test_file_layout(self, file_storage: JsonFileStorage) -> None:
        file_storage.set_item("a", "1")
        file_storage.set_item("b", "화염")
        assert file_storage.path.name == STATE_FILE_NAME
        assert json.loads(file_storage.path.read_text(encoding="utf-8")) == {"a": "1", "b": "화염"}
        assert list(file_storage.path.parent.iterdir()) == [file_storage.path]

    def test_remove_item(self, file_storage: JsonFileStorage) -> None:
        file_storage.set_item("a", "1")
        file_storage.remove_item("a")
        file_storage.remove_item("missing")
        assert file_storage.get_item("a") is None

    def test_non_string_values_ignored(self, file_storage: JsonFileStorage) -> None:
        file_storage.path.parent.mkdir(parents=True)
        file_storage.path.write_text('{"a": 5}', encoding="utf-8")
        assert file_storage.get_item("a") is None

    def test_corrupt_file_propagates(self, file_storage: JsonFileStorage) -> None:
        file_storage.path.parent.mkdir(parents=True)
        file_storage.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            file_storage.get_item("a")
