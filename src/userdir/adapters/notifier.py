"""In-process change notifier.

Delivers events synchronously, in subscription order, on the publishing
thread. The subscriber list is copied before delivery so callbacks may
subscribe or unsubscribe while an event is being delivered.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from userdir.interfaces.notifier import ChangeNotifier, Subscriber, Unsubscribe

if TYPE_CHECKING:
    from userdir.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class LocalChangeNotifier(ChangeNotifier):
    """Synchronous observer registry.

    A subscriber that raises aborts delivery: the exception is logged and
    re-raised to the publisher, and later subscribers do not see the event.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        with self._lock:
            self._subscribers.append(callback)

        active = True

        def unsubscribe() -> None:
            nonlocal active
            with self._lock:
                # each handle removes its own subscription at most once
                if active:
                    self._subscribers.remove(callback)
                    active = False

        return unsubscribe

    def publish(self, event: DomainEvent) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        logger.debug("Publishing %s to %d subscriber(s)", event, len(subscribers))
        for callback in subscribers:
            try:
                callback(event)
            except Exception:  # pylint: disable=broad-except
                logger.exception("Subscriber %r failed on event %s", callback, event)
                raise
