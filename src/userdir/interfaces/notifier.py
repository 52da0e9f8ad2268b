"""Interface for change notification.

After a mutation completes, the service layer publishes an event saying that
the set of users has changed. Presentation code subscribes to refresh any
cached listing it holds.
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userdir.domain.events import DomainEvent

Subscriber = Callable[["DomainEvent"], None]
Unsubscribe = Callable[[], None]


class ChangeNotifier(abc.ABC):
    """Contract for publishing change events to subscribers."""

    @abc.abstractmethod
    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Register `callback` and return a function that removes it again."""

    @abc.abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Deliver `event` to every current subscriber."""
