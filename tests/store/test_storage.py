"""Tests for tally.store.storage and tally.store.schema."""

from pathlib import Path

import pytest

from tally.store import (
    JsonFileStore,
    MemoryStore,
    StorageError,
    TransactionRepository,
    init_storage,
    read_collection,
    storage_exists,
    write_collection,
)
from tally.domain.transactions import create_transaction


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        """Should return None for any key when the file does not exist."""
        store = JsonFileStore(tmp_path / "storage.json")

        assert store.get("anything") is None

    def test_values_persist_across_instances(self, tmp_path: Path) -> None:
        """Should read back what another instance wrote."""
        path = tmp_path / "nested" / "storage.json"
        JsonFileStore(path).set("key", '["a"]')

        assert JsonFileStore(path).get("key") == '["a"]'

    def test_set_keeps_other_keys(self, tmp_path: Path) -> None:
        """Should only replace the key being written."""
        store = JsonFileStore(tmp_path / "storage.json")
        store.set("a", "1")
        store.set("b", "2")
        store.set("a", "3")

        assert store.get("a") == "3"
        assert store.get("b") == "2"

    def test_corrupt_file_raises(self, tmp_path: Path) -> None:
        """Should raise StorageError for invalid JSON."""
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError):
            JsonFileStore(path).get("key")

    def test_non_object_file_raises(self, tmp_path: Path) -> None:
        """Should raise StorageError when the file is not a JSON object."""
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(StorageError):
            JsonFileStore(path).get("key")

    def test_repository_round_trip(self, tmp_path: Path) -> None:
        """Should persist transactions between repository instances."""
        path = tmp_path / "storage.json"
        txn = create_transaction(
            date="2025-01-01", amount=9.99, type="expense", category="Food", payee="Cafe", reason="Coffee"
        )
        TransactionRepository(JsonFileStore(path)).add(txn)

        assert TransactionRepository(JsonFileStore(path)).list_all() == [txn]


class TestCollections:
    """Tests for read_collection and write_collection."""

    def test_absent_key_returns_copy_of_default(self) -> None:
        """Should return a fresh copy of the default."""
        default = ["x"]
        result = read_collection(MemoryStore(), "key", default)
        result.append("y")

        assert default == ["x"]

    def test_write_then_read(self) -> None:
        """Should store lists as JSON."""
        store = MemoryStore()
        write_collection(store, "key", [1, "two"])

        assert store.get("key") == '[1, "two"]'
        assert read_collection(store, "key", []) == [1, "two"]

    def test_non_array_value_raises(self) -> None:
        """Should reject stored values that are not arrays."""
        store = MemoryStore({"key": '{"a": 1}'})

        with pytest.raises(StorageError):
            read_collection(store, "key", [])

    def test_unavailable_store(self) -> None:
        """Should return the default and ignore writes without a store."""
        write_collection(None, "key", [1])

        assert read_collection(None, "key", ["default"]) == ["default"]


class TestSchema:
    """Tests for storage file initialization."""

    def test_init_storage_creates_empty_store(self, tmp_path: Path) -> None:
        """Should create an empty JSON object file."""
        path = tmp_path / "data" / "storage.json"
        assert not storage_exists(path)

        init_storage(path)

        assert storage_exists(path)
        assert JsonFileStore(path).get("accounting_categories") is None

    def test_default_path_uses_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place storage under XDG_DATA_HOME."""
        from tally.store.schema import get_default_storage_path

        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

        assert get_default_storage_path() == tmp_path / "tally" / "storage.json"
