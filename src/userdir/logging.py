"""Logging setup for the ``userdir`` CLI.

Two handlers are used:

- a Rich console handler on stderr, whose level follows ``-v``/``-q``;
- an optional "flight recorder": a `MemoryHandler` that keeps the most recent
  records at DEBUG and writes them to a file once something at WARNING or
  above is logged, so a failed run leaves a detailed trail behind.

Library records are shown on the console with a short ``[library]`` tag.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "userdir"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[<top-level package>]`` for library records.

    Records from ``userdir.*`` get an empty prefix. No record is dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.partition(".")[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown. Ignored in debug mode, which shows DEBUG.
        debug_mode: Add timestamps, logger names and clickable source paths.
        color: False disables colors (click-extra's ``--no-color``).
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder.

    The target file is opened lazily and truncated on first write, so a run
    that logs nothing at `flush_level` leaves any previous file untouched.

    Args:
        path: File the buffer is written to.
        capacity: Number of records kept in memory before an automatic flush.
        flush_level: Records at this level or above trigger a flush.
        flush_on_close: Write whatever is buffered when the handler closes.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log what this run is configured to do.

    One INFO line summarizes the setup; the environment details (interpreter,
    platform, library versions, handler setup) follow at DEBUG so they end up
    in the flight recorder without cluttering the console.
    """
    logger.info(
        "USERDIR %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    details: list[tuple[str, object]] = [
        ("Python", sys.version.split()[0]),
        ("Platform", f"{platform.system()} {platform.release()}"),
        ("PID", os.getpid()),
        ("CWD", Path.cwd()),
        ("Alembic", alembic.__version__),
        ("SQLAlchemy", sqlalchemy.__version__),
        ("Handlers", [type(h).__name__ for h in handlers]),
    ]
    if flight_recorder:
        details.append(
            (
                "Flight recorder",
                f"path={log_path or '<none>'}, capacity={flight_capacity}, "
                f"flush_on_close={force_flush_fr}",
            )
        )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    details.append(("Per-logger overrides", overrides or "<none>"))

    for label, value in details:
        logger.debug("%s: %s", label, value)
