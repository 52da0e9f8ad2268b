"""USERDIR users CLI: browse and edit the directory.

Commands
- ``list``: every user, optionally filtered by ``--search`` substring.
- ``show``: a single user by id.
- ``add``: create a user; prints the new id on stdout.
- ``edit``: change the first and/or last name of an existing user.
- ``delete``: remove a user (asks for confirmation unless ``--yes``).

Data goes to **stdout** (a Rich table, or JSON with ``--json``); notices go
to **stderr** so output can be piped.

The directory is built by `userdir.bootstrap` from ``USERDIR_STORE_URL``.
Callers embedding the CLI (tests, mostly) may pass a prebuilt
`UserDirectory` as the Click context object instead.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from userdir.bootstrap import UserDirectory, bootstrap
from userdir.domain.errors import DomainError
from userdir.domain.model import User
from userdir.interfaces.kv_store import InvalidEntryError, KeyValueStoreError

from .helpers import success

STORE_FAILURE_MSG = "The user store could not be reached: {reason}"
STORE_REJECTED_MSG = "The user store rejected the record: {reason}"
NOT_FOUND_MSG = "User ({user_id}) not found."


@contextmanager
def _cli_errors() -> Iterator[None]:
    """Turn store and domain failures into readable `ClickException`s."""
    try:
        yield
    except InvalidEntryError as e:
        raise click.ClickException(STORE_REJECTED_MSG.format(reason=e)) from e
    except KeyValueStoreError as e:
        raise click.ClickException(STORE_FAILURE_MSG.format(reason=e)) from e
    except DomainError as e:
        raise click.ClickException(str(e)) from e


def _display_order(users: list[User]) -> list[User]:
    return sorted(users, key=lambda u: (u.last_name, u.first_name, u.id or ""))


def _echo_json(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _render_table(users: list[User], title: str | None = None) -> None:
    table = Table(title=title)
    table.add_column("ID", no_wrap=True)
    table.add_column("First name")
    table.add_column("Last name")
    for user in users:
        table.add_row(user.id or "", user.first_name, user.last_name)
    Console(soft_wrap=True).print(table)


def _require_user(directory: UserDirectory, user_id: str) -> User:
    if (user := directory.get(user_id)) is None:
        raise click.ClickException(NOT_FOUND_MSG.format(user_id=user_id))
    return user


@click.group(cls=clickx.ExtraGroup)
@click.pass_context
def users(ctx: click.Context) -> None:
    """User directory commands."""
    if not isinstance(ctx.obj, UserDirectory):
        ctx.obj = bootstrap(seed_demo=True)


@users.command(name="list")
@click.option(
    "--search",
    "-s",
    "term",
    default="",
    help="Only show users whose first or last name contains TERM (case-sensitive).",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.pass_obj
def list_users(directory: UserDirectory, term: str, as_json: bool) -> None:
    """List users."""
    with _cli_errors():
        found = _display_order(directory.search(term))
    if as_json:
        _echo_json([user.to_dict() for user in found])
        return
    if not found:
        click.echo("No users found.", err=True)
        return
    _render_table(found, title=f"Users matching {term!r}" if term else "Users")


@users.command()
@click.argument("user_id")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.pass_obj
def show(directory: UserDirectory, user_id: str, as_json: bool) -> None:
    """Show the user stored under USER_ID."""
    with _cli_errors():
        user = _require_user(directory, user_id)
    if as_json:
        _echo_json(user.to_dict())
    else:
        _render_table([user])


@users.command()
@click.option("--first-name", "-f", required=True, help="First name.")
@click.option("--last-name", "-l", required=True, help="Last name.")
@click.pass_obj
def add(directory: UserDirectory, first_name: str, last_name: str) -> None:
    """Create a user and print its id."""
    with _cli_errors():
        user = directory.save(User(first_name=first_name, last_name=last_name))
    click.echo(user.id)
    success(f"Created {user.first_name} {user.last_name}")


@users.command()
@click.argument("user_id")
@click.option("--first-name", "-f", default=None, help="New first name.")
@click.option("--last-name", "-l", default=None, help="New last name.")
@click.pass_obj
def edit(
    directory: UserDirectory,
    user_id: str,
    first_name: str | None,
    last_name: str | None,
) -> None:
    """Change the name of the user stored under USER_ID."""
    if first_name is None and last_name is None:
        raise click.UsageError("Nothing to change: pass --first-name and/or --last-name.")
    with _cli_errors():
        user = _require_user(directory, user_id)
        updated = replace(
            user,
            first_name=user.first_name if first_name is None else first_name,
            last_name=user.last_name if last_name is None else last_name,
        )
        directory.save(updated)
    success(f"Updated {user_id}")


@users.command()
@click.argument("user_id")
@click.option("--yes", "-y", is_flag=True, help="Delete without confirmation.")
@click.pass_obj
def delete(directory: UserDirectory, user_id: str, yes: bool) -> None:
    """Delete the user stored under USER_ID."""
    if not yes:
        click.confirm(f"Delete user {user_id}?", abort=True, err=True)
    with _cli_errors():
        directory.delete(user_id)
    success(f"Deleted {user_id}")
