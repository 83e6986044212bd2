from .kv_store import DuckDBKeyValueStore, InMemoryKeyValueStore, KeyValueStore

__all__ = ["DuckDBKeyValueStore", "InMemoryKeyValueStore", "KeyValueStore"]
