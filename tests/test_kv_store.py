import pytest

from authflow.shared.infrastructure.persistence.kv_store import (
    DuckDBKeyValueStore,
    InMemoryKeyValueStore,
)


@pytest.fixture(params=["memory", "duckdb"])
def store(request, tmp_path):
    if request.param == "memory":
        kv = InMemoryKeyValueStore()
    else:
        kv = DuckDBKeyValueStore(str(tmp_path / "kv.duckdb"))
    yield kv
    kv.close()


def test_missing_key_is_none(store):
    assert store.get("absent") is None


def test_set_overwrites(store):
    store.set("k", "1")
    store.set("k", "2")

    assert store.get("k") == "2"


def test_remove_is_idempotent(store):
    store.set("k", "1")
    store.remove("k")
    store.remove("k")

    assert store.get("k") is None


def test_duckdb_store_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "kv.duckdb"
    kv = DuckDBKeyValueStore(str(path))
    kv.set("k", "v")
    kv.close()

    assert path.exists()


def test_duckdb_store_in_memory():
    kv = DuckDBKeyValueStore()
    kv.set("k", "v")

    assert kv.get("k") == "v"
    kv.close()


def test_closed_duckdb_store_raises(tmp_path):
    kv = DuckDBKeyValueStore(str(tmp_path / "kv.duckdb"))
    kv.close()
    kv.close()

    with pytest.raises(RuntimeError):
        kv.get("k")
    with pytest.raises(RuntimeError):
        kv.set("k", "v")
