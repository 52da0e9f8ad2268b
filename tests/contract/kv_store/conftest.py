"""Pytest fixtures for key-value store contract tests.

Provided fixtures
-----------------
- **kv_store**: Parametrized backend factory that returns a **fresh**
  `KeyValueStore` per test:
    - `"memory"` → `InMemoryKeyValueStore`
    - `"sqlite-memory"` → `SqlAlchemyKeyValueStore` on in-memory SQLite
      (tables from `metadata.create_all()`)
    - `"sqlite-file"` → `SqlAlchemyKeyValueStore` on a file-backed SQLite
      database migrated with Alembic
"""

from __future__ import annotations

import pytest

from userdir.adapters.kv_store import InMemoryKeyValueStore, SqlAlchemyKeyValueStore
from userdir.interfaces.kv_store import KeyValueStore


@pytest.fixture(params=["memory", "sqlite-memory", "sqlite-file"])
def kv_store(request: pytest.FixtureRequest) -> KeyValueStore:
    """Return a fresh key-value store for the requested backend."""

    match request.param:
        case "memory":
            return InMemoryKeyValueStore()
        case "sqlite-memory":
            return SqlAlchemyKeyValueStore(request.getfixturevalue("sqlite_engine_memory"))
        case "sqlite-file":
            return SqlAlchemyKeyValueStore(request.getfixturevalue("sqlite_engine_file"))
        case _:
            raise ValueError(f"unknown store type: {request.param}")
