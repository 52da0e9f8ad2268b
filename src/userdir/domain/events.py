"""Events"""

import abc
from dataclasses import dataclass
from enum import Enum


class ChangeKind(Enum):
    """Enumeration of the mutations that change the set of users."""

    SAVED = "saved"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.
    Requires a way to determine the affected user ID.
    """

    @property
    @abc.abstractmethod
    def aggregate_id(self) -> str:
        """Return the ID of the user this event belongs to."""


@dataclass(frozen=True, slots=True)
class UsersChanged(DomainEvent):
    """Event indicating that the set of users has changed.

    Any cached listing of users should be considered stale once this is seen.
    """

    user_id: str
    change: ChangeKind

    @property
    def aggregate_id(self) -> str:
        return self.user_id
