"""Domain layer for USERDIR.

Contains the `User` record, domain events, and domain errors. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `userdir.adapters` or `userdir.entrypoints`.
"""

from .errors import (
    DomainError,
    InvalidInputError,
    InvalidUserIdError,
    MalformedUserRecordError,
    MissingUserIdError,
)
from .events import ChangeKind, DomainEvent, UsersChanged
from .model import User

__all__ = [
    "ChangeKind",
    "DomainError",
    "DomainEvent",
    "InvalidInputError",
    "InvalidUserIdError",
    "MalformedUserRecordError",
    "MissingUserIdError",
    "User",
    "UsersChanged",
]
