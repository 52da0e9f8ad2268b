"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, fixtures to register that command, obtain a CliRunner and run tests
within an isolated filesystem, and a prebuilt `UserDirectory` that tests hand
to the ``users`` commands as the Click context object.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from userdir.adapters.id_generators import SimpleIdGenerator
from userdir.adapters.repositories import InMemoryUserRepository
from userdir.bootstrap import UserDirectory, bootstrap
from userdir.entrypoints.cli.main import userdir

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'userdir.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("userdir.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `userdir` for the duration of a test."""
    userdir.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(userdir, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes to the working directory.

    Pair with `fs` so the log file lands in a temporary directory.
    """
    return CliRunner(env={"USERDIR_LOG_PATH": "latest.log"})


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def directory(doe_family) -> UserDirectory:
    """An in-memory directory holding the Doe family, with predictable new ids."""
    return bootstrap(
        users=InMemoryUserRepository(doe_family),
        id_generator=SimpleIdGenerator(length=4),
    )


@pytest.fixture
def invoke(runner, fs, directory):
    """Invoke ``userdir`` with `directory` as the context object."""

    def _invoke(args, **kwargs):
        return runner.invoke(userdir, args, obj=directory, **kwargs)

    return _invoke
