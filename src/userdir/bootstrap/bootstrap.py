"""Bootstrap the message bus, repository and notifier into a `UserDirectory`."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from userdir import config
from userdir.adapters.db.engine import is_sqlite_memory, make_engine
from userdir.adapters.db.metadata import metadata
from userdir.adapters.id_generators import UUIDv4Generator
from userdir.adapters.kv_store import SqlAlchemyKeyValueStore
from userdir.adapters.notifier import LocalChangeNotifier
from userdir.adapters.repositories import (
    InMemoryUserRepository,
    KeyValueUserRepository,
)
from userdir.domain.model import DEMO_USERS
from userdir.service_layer import commands, queries
from userdir.service_layer.handlers import COMMAND_HANDLERS
from userdir.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from userdir.domain.model import User
    from userdir.interfaces.id_generator import IdGenerator
    from userdir.interfaces.kv_store import KeyValueStore
    from userdir.interfaces.notifier import ChangeNotifier, Subscriber, Unsubscribe
    from userdir.interfaces.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserDirectory:
    """Facade handed to presentation code.

    Queries read the repository directly; mutations go through the message
    bus so that every write is logged and announced on the notifier.
    """

    message_bus: MessageBus
    users: UserRepository
    notifier: ChangeNotifier

    def search(self, term: str = "") -> list[User]:
        """Users whose first or last name contains `term` (case-sensitive)."""
        return queries.search_users(self.users, term)

    def list_all(self) -> list[User]:
        """Every user, in store order."""
        return queries.list_users(self.users)

    def get(self, user_id: str) -> User | None:
        """The user stored under `user_id`, or None."""
        return queries.get_user(self.users, user_id)

    def save(self, user: User) -> User:
        """Create or overwrite `user`; returns the stored record with its id."""
        return self.message_bus.handle(commands.SaveUser(user=user))

    def delete(self, user_id: str) -> None:
        """Remove the user stored under `user_id`; unknown ids are ignored."""
        self.message_bus.handle(commands.DeleteUser(user_id=user_id))

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Call `callback` with a `UsersChanged` event after every mutation."""
        return self.notifier.subscribe(callback)


def build_store(url: str, *, create_schema: bool = False) -> KeyValueStore:
    """Build a SQLAlchemy-backed key-value store for `url`.

    Args:
        url: SQLAlchemy database URL.
        create_schema: Create missing tables with `metadata.create_all()`
            instead of relying on ``userdir db upgrade``. Always done for
            private in-memory SQLite databases, which cannot be migrated
            from another connection.
    """
    engine = make_engine(url)
    if create_schema or is_sqlite_memory(url):
        metadata.create_all(engine)
    return SqlAlchemyKeyValueStore(engine)


def build_repository(
    store_url: str | None, *, seed_demo: bool = False
) -> UserRepository:
    """Build the user repository for the configured store.

    Without a store URL the in-memory repository is used. It is not shared
    between processes and is lost on exit.
    """
    if store_url is None:
        logger.warning(
            "%s is not set; using a non-persistent in-memory user store",
            config.STORE_URL_ENV,
        )
        return InMemoryUserRepository(DEMO_USERS if seed_demo else ())
    return KeyValueUserRepository(build_store(store_url))


def build_message_bus(
    dependencies: Mapping[str, object],
    command_handlers: dict[type[commands.Command], Callable[..., Any]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(
    *,
    users: UserRepository | None = None,
    id_generator: IdGenerator | None = None,
    notifier: ChangeNotifier | None = None,
    seed_demo: bool = False,
) -> UserDirectory:
    """Wire the application.

    Every collaborator can be passed in (tests do); anything omitted is built
    from configuration: the repository from `USERDIR_STORE_URL`, UUIDv4 ids,
    and a local in-process notifier.

    Args:
        users: Repository to use instead of the configured one.
        id_generator: Generator for new user ids.
        notifier: Notifier that mutations are announced on.
        seed_demo: Seed the in-memory fallback with the demo users.
    """
    if users is None:
        users = build_repository(config.find_store_url(), seed_demo=seed_demo)
    id_generator = id_generator or UUIDv4Generator()
    notifier = notifier or LocalChangeNotifier()

    dependencies = {
        "users": users,
        "id_generator": id_generator,
        "notifier": notifier,
    }
    message_bus = build_message_bus(dependencies, COMMAND_HANDLERS)

    return UserDirectory(message_bus=message_bus, users=users, notifier=notifier)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
