"""Key-value store interface definitions.

The key-value store is the external collaborator that actually persists user
documents. It knows nothing about users: keys and values are plain strings,
and callers are responsible for (de)serializing values.
"""

import abc

KEY_MAX_LENGTH = 255


class KeyValueStoreError(Exception):
    """Base class for all key-value store errors."""


class StoreUnavailableError(KeyValueStoreError):
    """Raised when the backing store cannot be reached or fails to answer."""


class InvalidEntryError(KeyValueStoreError):
    """Raised when a key or value is one the store cannot hold."""


def _check_encodable(text: str, what: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidEntryError(
            f"{what} is not valid UTF-8 text (character at position {e.start})"
        ) from e


def check_key(key: str) -> None:
    """Raise `InvalidEntryError` unless `key` can be stored by every backend.

    Keys are 1 to `KEY_MAX_LENGTH` characters of UTF-8 encodable text.
    """
    if not key:
        raise InvalidEntryError("key is empty")
    if len(key) > KEY_MAX_LENGTH:
        raise InvalidEntryError(
            f"key is {len(key)} characters long (at most {KEY_MAX_LENGTH} allowed)"
        )
    _check_encodable(key, "key")


def check_value(value: str) -> None:
    """Raise `InvalidEntryError` unless `value` is UTF-8 encodable text."""
    _check_encodable(value, "value")


class KeyValueStore(abc.ABC):
    """Abstract base class for key-value store operations.

    Semantics shared by all implementations:
      - `set` overwrites any existing value (last write wins).
      - `get` returns `None` for an absent key; it never raises for that case.
      - `delete` of an absent key is a no-op.
      - `list_keys` matches keys against a glob pattern (`*`, `?`, `[...]`),
        case-sensitively. Order is implementation-defined.
      - Keys that fail `check_key` and values that fail `check_value` raise
        `InvalidEntryError`, as does anything else the backend refuses to
        store. Nothing is written in that case.
      - Transport or backend failures raise `StoreUnavailableError`.
    """

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value.

        Args:
            key (str): The key to write.
            value (str): The serialized value.

        Raises:
            InvalidEntryError: If the key or value cannot be stored.
            StoreUnavailableError: If the backing store fails.
        """

    @abc.abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under `key`, or None if absent.

        Raises:
            InvalidEntryError: If `key` is not a valid key.
            StoreUnavailableError: If the backing store fails.
        """

    @abc.abstractmethod
    def delete(self, key: str) -> None:
        """Remove `key` from the store. Absent keys are ignored.

        Raises:
            InvalidEntryError: If `key` is not a valid key.
            StoreUnavailableError: If the backing store fails.
        """

    @abc.abstractmethod
    def list_keys(self, pattern: str = "*") -> list[str]:
        """Return every key matching the glob `pattern`.

        Raises:
            StoreUnavailableError: If the backing store fails.
        """
