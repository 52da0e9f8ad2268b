"""SQL dialects with a native upsert.

`SqlAlchemyKeyValueStore` writes with ``INSERT ... ON CONFLICT DO UPDATE``
where the backend supports it; `DialectName` names those backends.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

_ALIASES = {
    "postgres": "postgresql",
    "pg": "postgresql",
}


class UnsupportedDialect(Exception):
    """Raised for a dialect without a native upsert."""


class DialectName(str, Enum):
    """Backends whose SQLAlchemy dialect offers ``on_conflict_do_update``."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Parse a dialect name such as ``"sqlite+pysqlite"`` or ``"Postgres"``.

        The driver suffix and letter case are ignored.

        Raises:
            UnsupportedDialect: For any other backend.
        """
        backend = (dialect_str or "").strip().lower().partition("+")[0]
        try:
            return cls(_ALIASES.get(backend, backend))
        except ValueError:
            raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}") from None

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Return the dialect of an Engine or Connection.

        Raises:
            UnsupportedDialect: If `obj` has no dialect, or an unsupported one.
        """
        dialect = getattr(obj, "dialect", None)
        if dialect is None:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            )
        return cls.from_string(dialect.name)
