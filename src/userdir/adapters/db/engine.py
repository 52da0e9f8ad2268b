"""Engine construction for the SQL-backed key-value store.

Always build engines through `make_engine` so that every connection gets the
same backend tuning:

- SQLite connections switch to WAL journaling, ``synchronous=NORMAL`` and
  in-memory temp storage.
- A private in-memory SQLite database (``sqlite://`` or
  ``sqlite:///:memory:``) exists only as long as its connection does, so it
  is pinned to one shared connection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_BACKEND = "sqlite"
SQLITE_MEMORY_DATABASES = (None, "", ":memory:")

SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA temp_store=MEMORY;",
)


def is_sqlite(url: str | URL) -> bool:
    """True if `url` selects the SQLite backend, whatever the driver."""
    return make_url(str(url)).get_backend_name() == SQLITE_BACKEND


def is_sqlite_memory(url: str | URL) -> bool:
    """True if `url` is a private in-memory SQLite database."""
    u = make_url(str(url))
    return u.get_backend_name() == SQLITE_BACKEND and u.database in SQLITE_MEMORY_DATABASES


def _apply_sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record: Any) -> None:  # pylint: disable=unused-argument
    cur = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cur.execute(pragma)
    finally:
        cur.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for `url` with the backend tuning described above.

    Args:
        url: SQLAlchemy database URL.
        echo: Log every SQL statement (through the ``sqlalchemy.engine`` logger).
    """
    kwargs: dict[str, Any] = {"echo": echo}
    if is_sqlite_memory(url):
        kwargs.update(
            poolclass=StaticPool, connect_args={"check_same_thread": False}
        )
    engine = create_engine(url, **kwargs)

    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)

    return engine
