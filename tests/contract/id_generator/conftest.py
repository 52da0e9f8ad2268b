"""Fixtures for id_generator contract tests."""

import pytest

from userdir.adapters.id_generators import SimpleIdGenerator, UUIDv4Generator
from userdir.interfaces.id_generator import IdGenerator

GENERATORS = {
    "uuid4": UUIDv4Generator,
    "simple": SimpleIdGenerator,
}


@pytest.fixture(params=sorted(GENERATORS))
def id_generator(request: pytest.FixtureRequest) -> IdGenerator:
    """A fresh instance of each IdGenerator implementation."""
    return GENERATORS[request.param]()
