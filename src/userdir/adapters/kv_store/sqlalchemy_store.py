"""SQLAlchemy-backed key-value store adapter for USERDIR.

Persists entries in the ``kv_entries`` table (see adapters.kv_store.schema).
Each operation runs in its own short transaction on a fresh connection taken
from the engine's pool, so one store instance may be shared across threads.

Writes are upserts: SQLite and PostgreSQL use ``INSERT ... ON CONFLICT DO
UPDATE``; other dialects fall back to delete-then-insert inside a single
transaction.

Exceptions:
    Keys and values are checked before any SQL is sent. ``IntegrityError`` and
    ``DataError`` (constraint violations, values the column cannot hold) map
    to `InvalidEntryError`; any other ``DBAPIError`` (OperationalError,
    InterfaceError, ...) maps to `StoreUnavailableError`.
"""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from sqlalchemy import delete, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError

from userdir.adapters.db.dialects import DialectName, UnsupportedDialect
from userdir.interfaces.kv_store import (
    InvalidEntryError,
    KeyValueStore,
    StoreUnavailableError,
    check_key,
    check_value,
)

from .schema import kv_entries

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

__all__ = ["SqlAlchemyKeyValueStore"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

MATCH_ALL = "*"  # pragma: no mutate


class SqlAlchemyKeyValueStore(KeyValueStore):
    """SQLAlchemy-backed KeyValueStore.

    - Uses the canonical `kv_entries` table (see adapters.kv_store.schema).
    - The table must exist (``userdir db upgrade`` or ``metadata.create_all``).
    - Glob matching for `list_keys` is done in Python so it stays
      case-sensitive on every backend.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        try:
            self._dialect: DialectName | None = DialectName.from_sqlalchemy(engine)
        except UnsupportedDialect:
            self._dialect = None

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def set(self, key: str, value: str) -> None:
        check_key(key)
        check_value(value)
        self._run(lambda conn: self._upsert(conn, key, value), write=True)
        logger.debug("set %s (%d bytes)", key, len(value))

    def get(self, key: str) -> str | None:
        check_key(key)
        stmt = select(kv_entries.c.value).where(kv_entries.c.key == key)
        return self._run(lambda conn: conn.execute(stmt).scalar_one_or_none())

    def delete(self, key: str) -> None:
        check_key(key)
        stmt = delete(kv_entries).where(kv_entries.c.key == key)
        removed = self._run(lambda conn: conn.execute(stmt).rowcount, write=True)
        logger.debug("delete %s (present=%s)", key, bool(removed))

    def list_keys(self, pattern: str = MATCH_ALL) -> list[str]:
        stmt = select(kv_entries.c.key)
        keys: list[str] = self._run(lambda conn: list(conn.execute(stmt).scalars()))
        if pattern == MATCH_ALL:
            return keys
        return [key for key in keys if fnmatch.fnmatchcase(key, pattern)]

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _run(self, operation: Callable[[Connection], T], *, write: bool = False) -> T:
        """Run `operation` on a pooled connection, mapping DBAPI failures."""
        try:
            if write:
                with self.engine.begin() as conn:
                    return operation(conn)
            with self.engine.connect() as conn:
                return operation(conn)
        except (IntegrityError, DataError) as e:
            raise InvalidEntryError(str(e)) from e
        except DBAPIError as e:  # OperationalError, InterfaceError, etc.
            raise StoreUnavailableError(str(e)) from e

    def _upsert(self, conn: Connection, key: str, value: str) -> None:
        match self._dialect:
            case DialectName.SQLITE:
                stmt = sqlite.insert(kv_entries).values(key=key, value=value)
                conn.execute(
                    stmt.on_conflict_do_update(
                        index_elements=[kv_entries.c.key],
                        set_={"value": stmt.excluded.value},
                    )
                )
            case DialectName.POSTGRES:
                pg_stmt = postgresql.insert(kv_entries).values(key=key, value=value)
                conn.execute(
                    pg_stmt.on_conflict_do_update(
                        index_elements=[kv_entries.c.key],
                        set_={"value": pg_stmt.excluded.value},
                    )
                )
            case _:
                conn.execute(delete(kv_entries).where(kv_entries.c.key == key))
                conn.execute(insert(kv_entries).values(key=key, value=value))
