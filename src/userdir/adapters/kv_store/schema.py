"""Key-value store schema.

Defines the ``kv_entries`` table backing `SqlAlchemyKeyValueStore`. Each row
is one key and its serialized value; writes replace the whole value.

Constraints (enforced here):

| Constraint               | Purpose                        |
|--------------------------|--------------------------------|
| PRIMARY KEY(key)         | one value per key              |
| CHECK(length(key) >= 1)  | keys are never empty           |
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, String, Table, Text

from userdir.adapters.db.metadata import metadata
from userdir.interfaces.kv_store import KEY_MAX_LENGTH

__all__ = ["kv_entries", "KEY_MAX_LENGTH"]

kv_entries = Table(
    "kv_entries",
    metadata,
    Column(
        "key",
        String(KEY_MAX_LENGTH),
        primary_key=True,
        nullable=False,
        comment="Entry key (for user documents, the user id).",
    ),
    Column(
        "value",
        Text,
        nullable=False,
        comment="Serialized value (JSON for user documents).",
    ),
    CheckConstraint("length(key) >= 1", name="key_not_empty"),
)
