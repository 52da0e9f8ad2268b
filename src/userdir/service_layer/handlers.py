"""Command handlers for user mutations.

Each handler performs a single write and, only once the write has returned,
announces `UsersChanged` so presentation code can drop cached listings.
"""

from collections.abc import Callable
from typing import Any

from userdir.domain.events import ChangeKind, UsersChanged
from userdir.domain.model import User
from userdir.interfaces.id_generator import IdGenerator
from userdir.interfaces.notifier import ChangeNotifier
from userdir.interfaces.user_repository import UserRepository
from userdir.service_layer import commands


def save_user(
    cmd: commands.SaveUser,
    users: UserRepository,
    id_generator: IdGenerator,
    notifier: ChangeNotifier,
) -> User:
    """Create or overwrite a user and return the stored record.

    A record without an id is new and receives a fresh one; a record with an
    id replaces whatever is stored under it. Names are stored as given.
    """
    user = cmd.user if cmd.user.has_id else cmd.user.with_id(id_generator.new_id())
    users.put(user)
    notifier.publish(UsersChanged(user_id=user.id, change=ChangeKind.SAVED))
    return user


def delete_user(
    cmd: commands.DeleteUser,
    users: UserRepository,
    notifier: ChangeNotifier,
) -> None:
    """Remove a user. Deleting an unknown id still counts as a change."""
    users.delete(cmd.user_id)
    notifier.publish(UsersChanged(user_id=cmd.user_id, change=ChangeKind.DELETED))


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.SaveUser: save_user,
    commands.DeleteUser: delete_user,
}
