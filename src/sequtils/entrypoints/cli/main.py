"""SEQUTILS CLI entry point.

Defines the top-level ``sequtils`` command (via Click-Extra), configures
logging for every subcommand, and registers the sequence commands.

Available commands
- ``one``, ``tail``, ``chunk``, ``page``, ``pages``, ``distinct``, ``dedupe``
  (see `sequtils.entrypoints.cli.commands`).

Notes
- The CLI version is sourced from `sequtils.__version__` and displayed by
  Click-Extra (``--version``).
- Log output goes to stderr; stdout carries only command results.

Examples
    $ sequtils --version
    $ seq 1 10 | sequtils chunk --size 3
    $ sequtils -v distinct --key casefold names.txt
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from sequtils import __version__
from sequtils.logging import (
    DEFAULT_FLIGHT_RECORDER_CAPACITY,
    LogSettings,
    configure_logging,
    log_startup,
)

from .commands import ALL_COMMANDS
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)

HELP = """SEQUTILS command-line interface.

    SEQUTILS applies small, lazy sequence helpers to lines of text: drop the first
    line, split input into fixed-size chunks, pick a page by index, or keep only the
    first line of each group of duplicates, by derived key or by a pairwise match.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://github.com/sequtils/sequtils#readme"),
        "  Issues: " + hyperlink("https://github.com/sequtils/sequtils/issues"),
    ]
)


DEFAULT_LOG_PATH = (
    Path(user_log_dir("sequtils", appauthor=False, ensure_exists=True)) / "latest.log"
)

# Applied in order, so the first entry is listed first in --help
LOGGING_OPTIONS = (
    click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show more log output on stderr (repeat for DEBUG).",
    ),
    click.option(
        "-q",
        "--quiet",
        count=True,
        help="Show less log output on stderr (repeat for CRITICAL only).",
    ),
    click.option(
        "--debug/--no-debug",
        default=False,
        help="Log everything, with logger names and source locations.",
    ),
    click.option(
        "--log-path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_LOG_PATH,
        envvar="SEQUTILS_LOG_PATH",
        show_default=True,
        show_envvar=True,
        help="File the flight recorder writes to.",
    ),
    click.option(
        "--flight-recorder/--no-flight-recorder",
        "flight_recorder",
        default=True,
        envvar="SEQUTILS_FLIGHT_RECORDER",
        show_envvar=True,
        help="Keep recent DEBUG records and write them to --log-path on WARNING.",
    ),
    click.option(
        "--flight-recorder-capacity",
        type=click.IntRange(min=1),
        default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
        envvar="SEQUTILS_FLIGHT_RECORDER_CAPACITY",
        hidden=True,
        help="Number of records the flight recorder keeps.",
    ),
    click.option(
        "--force-flush/--no-force-flush",
        "force_flush_flight_recorder",
        default=False,
        envvar="SEQUTILS_FORCE_FLUSH_FLIGHT_RECORDER",
        show_envvar=True,
        help="Also write the flight recorder on exit when nothing went wrong.",
    ),
    click.option(
        "-L",
        "--logger-level",
        "logger_levels",
        multiple=True,
        callback=parse_log_level,
        default=("click_extra=WARNING",),
        envvar="SEQUTILS_LOGGER_LEVEL",
        show_default=True,
        show_envvar=True,
        help="Minimum level for one logger, as NAME=LEVEL. Repeatable.",
    ),
)


def logging_options(func):
    """Attach every option in `LOGGING_OPTIONS` to a Click command callback."""
    for option in reversed(LOGGING_OPTIONS):
        func = option(func)
    return func


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@logging_options
@clickx.pass_context
def sequtils(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """SEQUTILS command-line interface."""
    settings = LogSettings(
        verbose=verbose,
        quiet=quiet,
        debug=debug,
        log_path=log_path,
        flight_recorder=flight_recorder,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings, color=ctx.color is not False)
    log_startup(logger, settings, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


for command in ALL_COMMANDS:
    sequtils.add_command(command)
