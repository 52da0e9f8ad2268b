"""Parsing of ``-L NAME=LEVEL`` logger overrides.

The option may be repeated on the command line, or given once through
``USERDIR_LOGGER_LEVELS`` as a comma and/or whitespace separated list.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = [value] if isinstance(value, str) else value
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_level(level_name: str) -> int:
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into ``{name: level}``.

    Library defaults (`DEFAULT_LIB_LEVELS`) come first and later items win.
    Level names are standard `logging` names in any letter case.

    Raises:
        click.BadParameter: On an item without ``=`` or an unknown level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _parse_level(level_name)
    return levels
