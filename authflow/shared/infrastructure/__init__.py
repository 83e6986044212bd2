"""
Shared Infrastructure Module
=============================

Technical adapters for external systems (durable key-value storage).
"""

# Persistence
from authflow.shared.infrastructure.persistence.kv_store import (
    DuckDBKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueStore,
)

__all__ = [
    "DuckDBKeyValueStore",
    "InMemoryKeyValueStore",
    "KeyValueStore",
]
