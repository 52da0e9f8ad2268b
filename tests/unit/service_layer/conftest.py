"""Fakes shared by the service-layer unit tests."""

from __future__ import annotations

import pytest

from userdir.adapters.id_generators import SimpleIdGenerator
from userdir.adapters.notifier import LocalChangeNotifier
from userdir.adapters.repositories import InMemoryUserRepository
from userdir.domain.events import DomainEvent
from userdir.domain.model import User
from userdir.interfaces.kv_store import StoreUnavailableError

# pylint: disable=redefined-outer-name


class FailingUserRepository(InMemoryUserRepository):
    """Repository whose writes fail as if the store were down."""

    def put(self, user: User) -> None:
        raise StoreUnavailableError("store is down")

    def delete(self, user_id: str) -> None:
        raise StoreUnavailableError("store is down")


@pytest.fixture
def users() -> InMemoryUserRepository:
    """An empty in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def failing_users() -> FailingUserRepository:
    """A repository that rejects every write."""
    return FailingUserRepository()


@pytest.fixture
def id_generator() -> SimpleIdGenerator:
    """Sequential, predictable ids."""
    return SimpleIdGenerator()


@pytest.fixture
def notifier() -> LocalChangeNotifier:
    """A local notifier with no subscribers yet."""
    return LocalChangeNotifier()


@pytest.fixture
def published(notifier: LocalChangeNotifier) -> list[DomainEvent]:
    """Events published on `notifier`, in order."""
    events: list[DomainEvent] = []
    notifier.subscribe(events.append)
    return events
