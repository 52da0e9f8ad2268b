"""User id generators."""

import itertools
import threading
import uuid

from userdir.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """Random ids in canonical UUIDv4 text form.

    This is the production generator: ids carry no ordering and reveal
    nothing about when or where a user was created.
    """

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Counter-based ids (``"0001"``, ``"0002"``, ...) for tests and demos.

    Args:
        length: Width the counter is zero-padded to.
    """

    def __init__(self, length: int = 4) -> None:
        self._length = length
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(next(self._counter)).zfill(self._length)
