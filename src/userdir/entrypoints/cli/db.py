"""``userdir db``: schema management for SQL-backed stores.

Thin wrappers around Alembic for the ``kv_entries`` schema. Only forward
operations are offered (``upgrade``); there is no ``downgrade`` or ``stamp``.

Alembic writes to **stdout**; notices, prompts and warnings go to **stderr**.
A missing, malformed or unreachable ``USERDIR_STORE_URL`` ends the command
with a `ClickException` explaining what to fix.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from userdir import config
from userdir.adapters.db.engine import make_engine

from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MISSING_STORE_URL_MSG = (
    "USERDIR_STORE_URL is not set.\n\n"
    "Point it at a SQLAlchemy database URL first, for example:\n"
    "  export USERDIR_STORE_URL='sqlite:///users.db'\n"
    "or, in PowerShell:\n"
    "  $env:USERDIR_STORE_URL='sqlite:///users.db'"
)

INVALID_URL_FORMAT_MSG = (
    "USERDIR_STORE_URL is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "Could not connect to the database named by USERDIR_STORE_URL.\n"
    "Check that the server is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "The user store schema will be upgraded to the latest revision.\n"
    "Make a backup of the database before continuing."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'userdir db upgrade' to bring the schema up to date."


class MigrationStatus(Enum):
    """Where the database stands relative to the newest migration."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _ping(url: str) -> None:
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    finally:
        engine.dispose()


def _get_url() -> str:
    """Return the configured store URL after checking the database answers."""
    try:
        url = config.get_store_url()
    except config.StoreUrlNotSetError as e:
        raise click.ClickException(MISSING_STORE_URL_MSG) from e
    try:
        _ping(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    return url


def _migration_status(engine: Engine, url: str) -> tuple[str | None, MigrationStatus]:
    with engine.connect() as conn:
        current = MigrationContext.configure(conn).get_current_revision()
    heads = ScriptDirectory.from_config(config.build_alembic_config(url)).get_heads()
    head = heads[0] if heads else None

    if current is None:
        return None, MigrationStatus.UNINITIALIZED
    if current == head:
        return current, MigrationStatus.UP_TO_DATE
    return current, MigrationStatus.OUT_OF_DATE  # pragma: nocover


verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Pass --verbose through to Alembic."
)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Manage the schema of a SQL user store."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Print the revision the database is at (nothing if uninitialized)."""
    cfg = config.build_alembic_config(store_url=_get_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Print the newest available revision. Needs no database."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@verbose_option
@click.option(
    "--indicate-current",
    "-i",
    is_flag=True,
    help="Mark the revision the database is at (needs USERDIR_STORE_URL).",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Print the list of revisions."""
    cfg = config.build_alembic_config(
        store_url=_get_url() if indicate_current else None, stdout=sys.stdout
    )
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it.")
@click.option("--force", is_flag=True, help="Do not ask for confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the newest revision."""
    url = _get_url()
    if not (force or sql):
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    command.upgrade(
        config.build_alembic_config(store_url=url, stdout=sys.stdout),
        revision="head",
        sql=sql,
    )
    if not sql:
        success("Upgrade complete!")


@db.command()
def status() -> None:
    """Report whether the database is reachable and its schema current."""
    try:
        url = _get_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        return

    success("Database reachable")
    engine = make_engine(url)
    try:
        revision, migration_status = _migration_status(engine, url)
        backend = engine.dialect.name
    finally:
        engine.dispose()

    click.echo(f"Backend : {backend}")
    click.echo(f"URL     : {sanitize_url(url)}")
    if revision is None:
        click.echo(f"Schema  : {migration_status.value}")
    else:
        click.echo(f"Schema  : {revision} ({migration_status.value})")

    if migration_status is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
