"""
Persistence adapters.

These modules encapsulate how the store snapshot is kept (JSON file by
default, a SQL table when STORAGE_BACKEND=sql). Services depend on the
SnapshotStore interface rather than touching the file or the database.
"""

from __future__ import annotations

from nullspire.core.config import Settings

from .base import PersistenceError, SnapshotStore
from .json_storage import JsonSnapshotStore


def build_snapshot_store(settings: Settings) -> SnapshotStore:
    backend = settings.storage_backend
    if backend == "json":
        return JsonSnapshotStore(settings.data_file)
    if backend == "sql":
        from .sql_repository import SQLSnapshotStore

        return SQLSnapshotStore()
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


__all__ = ["PersistenceError", "SnapshotStore", "JsonSnapshotStore", "build_snapshot_store"]
