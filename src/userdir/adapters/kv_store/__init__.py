"""Key-value store adapters.

- `InMemoryKeyValueStore`: dict-backed, non-durable; tests and demos.
- `SqlAlchemyKeyValueStore`: relational table via SQLAlchemy; durable.
"""

from .memory import InMemoryKeyValueStore
from .sqlalchemy_store import SqlAlchemyKeyValueStore

__all__ = ["InMemoryKeyValueStore", "SqlAlchemyKeyValueStore"]
