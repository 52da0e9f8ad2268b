"""Runtime configuration for USERDIR.

Everything is read from the environment:

- ``USERDIR_STORE_URL``: SQLAlchemy URL of the key-value store. When unset,
  the application falls back to a non-persistent in-memory store.

The Alembic configuration is built in code rather than from an ``alembic.ini``
so the migrations ship inside the package.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

STORE_URL_ENV = "USERDIR_STORE_URL"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate
MIGRATIONS_PACKAGE = "userdir.adapters.db"  # pragma: no mutate


class StoreUrlNotSetError(Exception):
    """Raised when USERDIR_STORE_URL is unset or empty."""


def get_store_url() -> str:
    """Return the value of ``USERDIR_STORE_URL``.

    Raises:
        StoreUrlNotSetError: If the variable is unset or empty.
    """
    url = os.environ.get(STORE_URL_ENV, "")
    if not url:
        raise StoreUrlNotSetError(f"{STORE_URL_ENV} is not set")
    return url


def find_store_url() -> str | None:
    """Like `get_store_url`, but None instead of an error when unset."""
    return os.environ.get(STORE_URL_ENV) or None


def build_alembic_config(
    store_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Return an Alembic `Config` for the packaged migrations.

    Args:
        store_url: Database to migrate. May be omitted for commands that only
            read the migration scripts (``heads``, plain ``history``).
        stdout: Stream Alembic prints its status lines to.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY, str(files(MIGRATIONS_PACKAGE) / "alembic")
    )
    if store_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, store_url)
    return cfg
