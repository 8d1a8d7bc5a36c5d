"""Tests for the storage backends."""

import pytest

from campus_portal.config.storage import StorageConfig
from campus_portal.storage import JSONStorage, MemoryStorage, SQLiteStorage


@pytest.fixture(params=['memory', 'sqlite'])
def any_storage(request, tmp_path):
    if request.param == 'memory':
        yield MemoryStorage()
    else:
        storage = SQLiteStorage(StorageConfig(sqlite_path=tmp_path / 'storage.db'))
        yield storage
        storage.dispose()


def test_set_get_remove(any_storage):
    assert any_storage.get_item("userId") is None

    any_storage.set_item("userId", "S1")
    any_storage.set_item("userId", "S2")
    any_storage.set_item("userType", "student")

    assert any_storage.get_item("userId") == "S2"
    assert sorted(any_storage.keys()) == ["userId", "userType"]

    any_storage.remove_item("userId")
    any_storage.remove_item("userId")

    assert any_storage.get_item("userId") is None
    assert any_storage.keys() == ["userType"]


def test_clear(any_storage):
    any_storage.set_item("a", "1")
    any_storage.set_item("b", "2")

    any_storage.clear()

    assert any_storage.keys() == []


def test_sqlite_storage_survives_reopening(tmp_path):
    config = StorageConfig(sqlite_path=tmp_path / 'nested' / 'portal.db')
    first = SQLiteStorage(config)
    first.set_item("userId", "S1")
    first.dispose()

    second = SQLiteStorage(config)
    try:
        assert second.get_item("userId") == "S1"
    finally:
        second.dispose()


def test_in_memory_sqlite_url():
    storage = SQLiteStorage(StorageConfig(storage_url="sqlite:///:memory:"))

    storage.set_item("k", "v")

    assert storage.get_item("k") == "v"


def test_json_storage_reads_corrupt_values_as_none():
    raw = MemoryStorage({"good": '{"a": 1}', "bad": "{not json"})
    storage = JSONStorage(raw)

    assert storage.get_item("good") == {"a": 1}
    assert storage.get_item("bad") is None
    assert storage.get_item("missing") is None


def test_json_storage_swallows_write_failures(caplog):
    class BrokenStorage(MemoryStorage):
        def set_item(self, key, value):
            raise OSError("disk full")

    storage = JSONStorage(BrokenStorage())

    storage.set_item("event-store", {"state": {}})

    assert "disk full" in caplog.text
