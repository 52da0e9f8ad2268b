"""Pytest fixtures for user repository contract tests.

Provided fixtures
-----------------
- **repository**: Parametrized factory that returns a **fresh**, empty
  `UserRepository` per test:
    - `"memory"` → `InMemoryUserRepository`
    - `"kv-memory"` → `KeyValueUserRepository` over `InMemoryKeyValueStore`
    - `"kv-sqlite"` → `KeyValueUserRepository` over `SqlAlchemyKeyValueStore`
      on in-memory SQLite
- **repository_factory**: Module-scoped callable over the same backends that
  builds a fresh repository on every call, for Hypothesis tests that need
  one per generated example.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

import pytest

from userdir.adapters.db.engine import make_engine
from userdir.adapters.db.metadata import metadata
from userdir.adapters.kv_store import InMemoryKeyValueStore, SqlAlchemyKeyValueStore
from userdir.adapters.repositories import (
    InMemoryUserRepository,
    KeyValueUserRepository,
)
from userdir.interfaces.user_repository import UserRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

REPOSITORY_KINDS = ["memory", "kv-memory", "kv-sqlite"]


@pytest.fixture(params=REPOSITORY_KINDS)
def repository(request: pytest.FixtureRequest) -> UserRepository:
    """Return a fresh, empty user repository for the requested backend."""

    match request.param:
        case "memory":
            return InMemoryUserRepository()
        case "kv-memory":
            return KeyValueUserRepository(InMemoryKeyValueStore())
        case "kv-sqlite":
            engine = request.getfixturevalue("sqlite_engine_memory")
            return KeyValueUserRepository(SqlAlchemyKeyValueStore(engine))
        case _:
            raise ValueError(f"unknown repository type: {request.param}")


@pytest.fixture(scope="module", params=REPOSITORY_KINDS)
def repository_factory(
    request: pytest.FixtureRequest,
) -> Iterator[Callable[[], UserRepository]]:
    """Yield a factory returning a fresh, empty repository per call."""
    engines: list[Engine] = []

    def make() -> UserRepository:
        match request.param:
            case "memory":
                return InMemoryUserRepository()
            case "kv-memory":
                return KeyValueUserRepository(InMemoryKeyValueStore())
            case "kv-sqlite":
                engine = make_engine("sqlite+pysqlite:///:memory:")
                metadata.create_all(engine)
                engines.append(engine)
                return KeyValueUserRepository(SqlAlchemyKeyValueStore(engine))
            case _:
                raise ValueError(f"unknown repository type: {request.param}")

    yield make
    for engine in engines:
        engine.dispose()
