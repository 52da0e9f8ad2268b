"""In-memory user repository.

Used when no external store is configured (single-user demos) and in tests.
Records live in a dict keyed by id and are lost when the process exits.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from userdir.domain.model import User, check_user_id
from userdir.interfaces.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed `UserRepository`.

    Args:
        users: Optional records to start with (e.g. the demo users). Each must
            already carry an id.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.RLock()
        for user in users:
            self.put(user)

    def put(self, user: User) -> None:
        user_id = check_user_id(user.id)
        with self._lock:
            self._users[user_id] = user

    def get(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def list_all(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def delete(self, user_id: str) -> None:
        with self._lock:
            self._users.pop(user_id, None)
