"""Alembic environment for the USERDIR key-value schema.

The database URL is taken from, in order:

1. ``-x url=...`` on the alembic command line,
2. ``sqlalchemy.url`` in the Alembic config (set by ``userdir db``),
3. the ``USERDIR_STORE_URL`` environment variable.

Type and server-default drift are compared on autogenerate; SQLite runs in
batch mode so ALTERs are emulated by table copies.
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# importing the schema registers kv_entries on the shared metadata
import userdir.adapters.kv_store.schema  # noqa: F401 # pylint: disable=unused-import
from userdir.adapters.db.metadata import metadata

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def get_url() -> str:
    """Return the first configured database URL."""
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option("sqlalchemy.url"),
        os.environ.get("USERDIR_STORE_URL"),
    )
    for url in candidates:
        # an unexpanded "%(...)s" placeholder from an ini file counts as unset
        if url and "%(" not in url:
            return url
    raise RuntimeError("No database URL: set USERDIR_STORE_URL or pass -x url=...")


def run_migrations_offline() -> None:
    """Render the migration SQL without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection."""
    engine = engine_from_config(
        {"sqlalchemy.url": get_url()}, prefix="sqlalchemy.", poolclass=pool.NullPool
    )
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
