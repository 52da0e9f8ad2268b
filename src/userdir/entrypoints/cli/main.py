"""Top-level ``userdir`` command.

The group itself only sets up logging; the work happens in its subgroups:

- ``userdir users`` lists, searches and edits user records.
- ``userdir db`` manages the SQL schema behind ``USERDIR_STORE_URL``.

Without ``USERDIR_STORE_URL`` the ``users`` commands use a throwaway
in-memory store that starts with a few demo users.

Examples
    $ userdir users list --search Doe
    $ USERDIR_STORE_URL=sqlite:///users.db userdir db upgrade
    $ userdir -vv -L sqlalchemy.engine=INFO users list
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from userdir import __version__
from userdir.logging import config_console_handler, config_flight_recorder, log_startup

from .db import db as db_group
from .helpers import parse_log_level
from .users import users as users_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

HELP = """Keep a small directory of people.

    Each record has an id, a first name and a last name. Records live in a
    key-value store selected with USERDIR_STORE_URL.
    """

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000


def _default_log_path() -> Path:
    log_dir = user_log_dir("userdir", appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"


def _console_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING, moved one level per -v (down) or -q (up), clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show more log output on the console (repeatable: -v INFO, -vv DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show less log output on the console (repeatable).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=_default_log_path,
    envvar="USERDIR_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
    help="File the flight recorder dumps its buffer to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    envvar="USERDIR_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    hidden=True,
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer recent DEBUG records in memory and write them to --log-path "
        "as soon as a WARNING or worse is logged. Independent of -v/-q."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    envvar="USERDIR_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "NAME=LEVEL minimum level for one logger, applied to the console and "
        "the flight recorder alike. Repeatable; the environment variable takes "
        "a comma or space separated list."
    ),
)
@clickx.pass_context
def userdir(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Keep a small directory of people."""
    level = _console_level(verbose_count, quiet_count)

    # color=None means "let the terminal decide"
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )

    # handlers do the filtering; the root logger passes everything
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, logger_level in logger_levels.items():
        logging.getLogger(name).setLevel(logger_level)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


userdir.add_command(users_group)
userdir.add_command(db_group)
