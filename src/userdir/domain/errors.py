"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidInputError(DomainError):
    """Raised when a user record cannot be accepted as given."""


class MissingUserIdError(InvalidInputError):
    """Raised when a record without an identifier is written to a repository."""

    def __init__(self) -> None:
        super().__init__("User record has no id; assign one before storing it.")


class MalformedUserRecordError(DomainError):
    """Raised when a stored document cannot be read back as a `User`."""

    def __init__(self, key: str | None, reason: str) -> None:
        super().__init__(f"Stored user record ({key}) is malformed: {reason}")
        self.key = key
        self.reason = reason


class InvalidUserIdError(InvalidInputError):
    """Raised when a record's id cannot be used as a storage key."""

    def __init__(self, user_id: str, reason: str) -> None:
        super().__init__(f"User id is not valid: {reason}")
        self.user_id = user_id
        self.reason = reason
