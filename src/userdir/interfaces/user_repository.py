"""Interface for user repositories."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userdir.domain.model import User


class UserRepository(abc.ABC):
    """Contract for persisting `User` records by identifier.

    All operations may raise `StoreUnavailableError` when the backing store
    fails; the error reaches the caller unchanged and is never retried.
    """

    @abc.abstractmethod
    def put(self, user: User) -> None:
        """Write the full record under `user.id`, overwriting any previous one.

        Raises:
            MissingUserIdError: If `user.id` is unset or empty.
            InvalidUserIdError: If `user.id` cannot be a storage key (see
                `userdir.domain.model.check_user_id`).
        """

    @abc.abstractmethod
    def get(self, user_id: str) -> User | None:
        """Return the record stored under `user_id`, or None if absent.

        An id that could never be stored is simply absent.
        """

    @abc.abstractmethod
    def list_all(self) -> list[User]:
        """Return every stored record. Order is unspecified."""

    @abc.abstractmethod
    def delete(self, user_id: str) -> None:
        """Remove the record stored under `user_id`; absent ids are ignored."""
