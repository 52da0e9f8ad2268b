"""User repository backed by a `KeyValueStore`.

Each user is stored as one JSON document under its id. The document keeps
the record's field names (``id``, ``firstName``, ``lastName``) so it stays
readable by other clients of the same store. Non-ASCII characters are
written as ``\\uXXXX`` escapes, which also carries lone surrogates through
stores that only accept UTF-8 text.

The store is dedicated to users: every key it lists is read as a user
document.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from userdir.domain.errors import MalformedUserRecordError
from userdir.domain.model import User, check_user_id
from userdir.interfaces.kv_store import InvalidEntryError
from userdir.interfaces.user_repository import UserRepository

if TYPE_CHECKING:
    from userdir.interfaces.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class KeyValueUserRepository(UserRepository):
    """`UserRepository` over an external key-value store.

    Args:
        store: The key-value store holding the documents.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def put(self, user: User) -> None:
        self.store.set(check_user_id(user.id), self._encode(user))

    def get(self, user_id: str) -> User | None:
        try:
            raw = self.store.get(user_id)
        except InvalidEntryError:
            # not a storable key, so nothing can be stored under it
            return None
        if raw is None:
            return None
        return self._decode(user_id, raw)

    def list_all(self) -> list[User]:
        users: list[User] = []
        for key in self.store.list_keys():
            # a key may vanish between enumeration and fetch
            if (user := self.get(key)) is not None:
                users.append(user)
        logger.debug("listed %d user(s)", len(users))
        return users

    def delete(self, user_id: str) -> None:
        try:
            self.store.delete(user_id)
        except InvalidEntryError:
            # nothing was ever stored under an unstorable key
            return

    @staticmethod
    def _encode(user: User) -> str:
        return json.dumps(user.to_dict())

    @staticmethod
    def _decode(key: str, raw: str) -> User:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedUserRecordError(key, f"invalid JSON ({e.msg})") from e
        user = User.from_dict(data, key=key)
        if user.id is None:
            return user.with_id(key)
        if user.id != key:
            raise MalformedUserRecordError(
                key, f"stored id {user.id!r} does not match its key"
            )
        return user
