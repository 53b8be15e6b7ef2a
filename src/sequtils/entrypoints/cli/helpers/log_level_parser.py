"""Helpers for parsing ``-L/--logger-level`` CLI options.

Values have the form NAME=LEVEL and may be repeated on the command line or
given as one comma/space-separated string (e.g. from SEQUTILS_LOGGER_LEVEL).
"""

import logging
import re

import click

# Libraries that are noisy at DEBUG and not useful to most users
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten `value` into non-empty items split on commas and whitespace.

    Args:
        value (str | list[str] | tuple[str, ...]): The raw option value; a
            single string or the tuple Click builds for repeatable options.

    Returns:
        list[str]: The individual NAME=LEVEL items.
    """
    parts = [value] if isinstance(value, str) else list(value)
    return [s for part in parts for s in re.split(r"[,\s]+", part) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name->level mapping.

    The result starts from DEFAULT_LIB_LEVELS; later items override earlier
    ones for the same logger name. Level names are case-insensitive.

    Args:
        ctx (click.Context): Click context (unused).
        param (click.Parameter | None): Click parameter (unused).
        value (str | list[str] | tuple[str, ...]): The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
