"""Tests for the key-value store backends."""

import logging
from unittest.mock import patch

import pytest

from explore_session.errors import StoreError
from explore_session.infrastructure import store as store_module
from explore_session.infrastructure.store import (
    JsonFileStore,
    MemoryStore,
    create_store,
    get_default_store,
    set_default_store,
)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    """Run each contract test against both backends."""
    if request.param == "memory":
        return MemoryStore()
    return JsonFileStore(tmp_path / "store.json")


def test_set_get_exists_remove(store) -> None:
    assert not store.exists("k")
    assert store.get("k") is None

    store.set("k", "v")
    assert store.exists("k")
    assert store.get("k") == "v"

    store.remove("k")
    assert not store.exists("k")


def test_remove_missing_key(store) -> None:
    store.remove("missing")
    assert not store.exists("missing")


def test_object_round_trip(store) -> None:
    value = [{"query": {"expr": 'a{b="c/d"}'}, "ts": 1}]
    store.set_object("obj", value)
    assert store.get_object("obj") == value


def test_get_object_default(store) -> None:
    assert store.get_object("missing") is None
    assert store.get_object("missing", []) == []


def test_get_object_invalid_json_returns_default(store, caplog) -> None:
    store.set("bad", "{not json")
    with caplog.at_level(logging.ERROR):
        assert store.get_object("bad", []) == []
    assert "Error parsing store object: bad" in caplog.text


def test_set_object_unserializable(store) -> None:
    with pytest.raises(StoreError):
        store.set_object("obj", {"x": object()})
    assert not store.exists("obj")


def test_file_store_persists_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "store.json"
    JsonFileStore(path).set("k", "v")
    assert path.exists()
    assert JsonFileStore(path).get("k") == "v"


def test_file_store_corrupt_file_starts_empty(tmp_path, caplog) -> None:
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")
    store = JsonFileStore(path)
    with caplog.at_level(logging.ERROR):
        assert store.get("k") is None
    assert "corrupt" in caplog.text

    store.set("k", "v")
    assert store.get("k") == "v"


def test_file_store_write_leaves_only_the_store_file(tmp_path) -> None:
    path = tmp_path / "store.json"
    store = JsonFileStore(path)
    store.set("a", "1")
    store.set("b", "2")
    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


def test_file_store_failed_write_keeps_previous_file(tmp_path) -> None:
    path = tmp_path / "store.json"
    store = JsonFileStore(path)
    store.set("a", "1")
    before = path.read_text(encoding="utf-8")

    with patch.object(store_module.json, "dump", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            store.set("b", "2")

    assert path.read_text(encoding="utf-8") == before
    assert store.get("a") == "1"
    assert not store.exists("b")
    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


def test_file_store_non_object_file(tmp_path) -> None:
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert not JsonFileStore(path).exists("k")


def test_memory_store_clear() -> None:
    store = MemoryStore({"a": "1"})
    store.clear()
    assert not store.exists("a")


def test_create_store(tmp_path, default_store) -> None:
    assert create_store() is default_store
    file_store = create_store(tmp_path / "s.json")
    assert isinstance(file_store, JsonFileStore)
    assert file_store.path == tmp_path / "s.json"


def test_set_default_store(default_store) -> None:
    assert get_default_store() is default_store
    replacement = MemoryStore()
    set_default_store(replacement)
    assert get_default_store() is replacement
