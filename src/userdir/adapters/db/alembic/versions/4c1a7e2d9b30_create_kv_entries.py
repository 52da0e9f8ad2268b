"""Create kv_entries table

Revision ID: 4c1a7e2d9b30
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "4c1a7e2d9b30"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "kv_entries",
        sa.Column(
            "key",
            sa.String(length=255),
            nullable=False,
            comment="Entry key (for user documents, the user id).",
        ),
        sa.Column(
            "value",
            sa.Text(),
            nullable=False,
            comment="Serialized value (JSON for user documents).",
        ),
        sa.CheckConstraint("length(key) >= 1", name=op.f("ck_kv_entries_key_not_empty")),
        sa.PrimaryKeyConstraint("key", name=op.f("pk_kv_entries")),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("kv_entries")
