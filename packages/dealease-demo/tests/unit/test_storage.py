"""Unit tests for storage backends."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dealease_demo.errors import InvalidArgumentError, PersistenceFailureError
from dealease_demo.storage import FileStorage, MemoryStorage, StorageBackend

pytestmark = pytest.mark.unit


class TestMemoryStorage:
    def test_set_get_remove(self) -> None:
        storage = MemoryStorage()
        assert storage.get_item("k") is None

        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"
        assert "k" in storage

        storage.remove_item("k")
        storage.remove_item("k")
        assert len(storage) == 0

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(MemoryStorage(), StorageBackend)
        assert isinstance(FileStorage(tmp_path), StorageBackend)


class TestFileStorage:
    def test_missing_key_is_none(self, tmp_path: Path) -> None:
        assert FileStorage(tmp_path / "absent").get_item("session") is None

    def test_round_trip_creates_directory(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "nested" / "dir")
        storage.set_item("session", '{"isActive": false}')

        assert storage.get_item("session") == '{"isActive": false}'
        assert storage.path_for("session") == tmp_path / "nested" / "dir" / "session.json"

    def test_overwrite_leaves_no_temp_files(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        storage.set_item("session", "one")
        storage.set_item("session", "two")

        assert storage.get_item("session") == "two"
        assert sorted(os.listdir(tmp_path)) == ["session.json"]

    def test_remove(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path)
        storage.set_item("session", "x")
        storage.remove_item("session")
        storage.remove_item("session")
        assert storage.get_item("session") is None

    @pytest.mark.parametrize("key", ["../escape", "a/b", "", "with space"])
    def test_rejects_unsafe_keys(self, tmp_path: Path, key: str) -> None:
        with pytest.raises(InvalidArgumentError):
            FileStorage(tmp_path).path_for(key)

    def test_unreadable_record(self, tmp_path: Path) -> None:
        (tmp_path / "session.json").write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(PersistenceFailureError) as exc_info:
            FileStorage(tmp_path).get_item("session")
        assert exc_info.value.operation == "read"

    def test_write_into_file_path_fails(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(PersistenceFailureError) as exc_info:
            FileStorage(blocker).set_item("session", "x")
        assert exc_info.value.operation == "write"
