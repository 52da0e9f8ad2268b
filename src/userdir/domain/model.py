"""The `User` record and its stored-document mapping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from .errors import InvalidUserIdError, MalformedUserRecordError, MissingUserIdError

# Field names of the stored document; kept stable across storage backends.
ID_FIELD = "id"
FIRST_NAME_FIELD = "firstName"
LAST_NAME_FIELD = "lastName"

USER_ID_MAX_LENGTH = 255


@dataclass(frozen=True, slots=True)
class User:
    """A directory entry.

    Conventions:
      - `id` is `None` only before the record is saved for the first time.
        Once assigned it never changes; it is also the storage key.
      - `first_name` and `last_name` are stored exactly as given (no trimming,
        no case folding, empty strings allowed).
    """

    first_name: str
    last_name: str
    id: str | None = None

    @property
    def has_id(self) -> bool:
        """True if the record already carries a (non-empty) identifier."""
        return bool(self.id)

    def with_id(self, user_id: str) -> User:
        """Return a copy of this record carrying `user_id`."""
        return replace(self, id=user_id)

    def matches(self, term: str) -> bool:
        """True if `term` is a case-sensitive substring of either name."""
        return term in self.first_name or term in self.last_name

    def to_dict(self) -> dict[str, Any]:
        """Map the record to its stored document."""
        return {
            ID_FIELD: self.id,
            FIRST_NAME_FIELD: self.first_name,
            LAST_NAME_FIELD: self.last_name,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], key: str | None = None) -> User:
        """Build a record from its stored document.

        Args:
            data: The decoded document.
            key: The storage key the document was read from, for error messages.

        Raises:
            MalformedUserRecordError: If a name field is missing or not a string,
                or the id is present but not a string.
        """
        if not isinstance(data, Mapping):
            raise MalformedUserRecordError(key, "document is not an object")

        for field in (FIRST_NAME_FIELD, LAST_NAME_FIELD):
            if not isinstance(data.get(field), str):
                raise MalformedUserRecordError(key, f"'{field}' must be a string")

        user_id = data.get(ID_FIELD)
        if user_id is not None and not isinstance(user_id, str):
            raise MalformedUserRecordError(key, f"'{ID_FIELD}' must be a string")

        return cls(
            first_name=data[FIRST_NAME_FIELD],
            last_name=data[LAST_NAME_FIELD],
            id=user_id,
        )


def check_user_id(user_id: str | None) -> str:
    """Return `user_id` if it can serve as a storage key.

    Raises:
        MissingUserIdError: If `user_id` is None or empty.
        InvalidUserIdError: If it is longer than `USER_ID_MAX_LENGTH` or is not
            UTF-8 encodable (e.g. holds a lone surrogate).
    """
    if not user_id:
        raise MissingUserIdError()
    if len(user_id) > USER_ID_MAX_LENGTH:
        raise InvalidUserIdError(
            user_id,
            f"{len(user_id)} characters long (at most {USER_ID_MAX_LENGTH} allowed)",
        )
    try:
        user_id.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidUserIdError(user_id, "not valid UTF-8 text") from e
    return user_id


DEMO_USERS: tuple[User, ...] = (
    User(
        id="03b6055b-8edf-40be-8961-7521340440d1", first_name="John", last_name="Doe"
    ),
    User(
        id="88fbb6c3-ae08-4830-8b69-81ae34bbff14", first_name="Jane", last_name="Doe"
    ),
    User(
        id="fd4a4acd-a64a-406a-852f-7461e9820229", first_name="John", last_name="Smith"
    ),
)
