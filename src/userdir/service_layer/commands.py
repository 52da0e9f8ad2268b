"""Module defining Commands."""

from dataclasses import dataclass

from userdir.domain.model import User


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class SaveUser(Command):
    """Command to create a user (no id yet) or overwrite an existing one."""

    user: User


@dataclass(frozen=True)
class DeleteUser(Command):
    """Command to remove a user; unknown ids are accepted."""

    user_id: str
