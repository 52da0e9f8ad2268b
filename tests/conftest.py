"""Global pytest fixtures for USERDIR."""

from __future__ import annotations

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]


@pytest.fixture(autouse=True)
def _no_configured_store(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's USERDIR_STORE_URL from leaking into tests."""
    monkeypatch.delenv("USERDIR_STORE_URL", raising=False)
