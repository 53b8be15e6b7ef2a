"""Logging setup for the SEQUTILS CLI.

The CLI logs to two places:

* the console, through a Rich handler on stderr, at a level chosen with
  ``-v``/``-q`` (stdout stays reserved for command results);
* an optional in-memory "flight recorder" holding the most recent records at
  DEBUG granularity. It writes them to a file only when a WARNING or worse
  is logged, or on exit when force-flush is requested.

`LogSettings` collects the options the top-level command receives,
`configure_logging` installs the handlers on the root logger, and
`log_startup` records what was configured.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from sequtils import config

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_CONSOLE_LEVEL = logging.WARNING
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LogSettings:
    """Logging options as given on the command line.

    Attributes:
        verbose: Number of ``-v`` flags; each lowers the console level by one step.
        quiet: Number of ``-q`` flags; each raises the console level by one step.
        debug: Log everything to the console, with logger names and source paths.
        log_path: File the flight recorder writes to.
        flight_recorder: Whether the flight recorder is installed at all.
        capacity: Number of records the flight recorder keeps.
        force_flush: Write the flight recorder buffer on exit even without a WARNING.
        logger_levels: Minimum level per logger name.
    """

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    log_path: Path | None = None
    flight_recorder: bool = False
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """Console level after applying ``-v``/``-q``, clamped to DEBUG..CRITICAL."""
        if self.debug:
            return logging.DEBUG
        level = DEFAULT_CONSOLE_LEVEL + 10 * (self.quiet - self.verbose)
        return max(logging.DEBUG, min(logging.CRITICAL, level))

    @property
    def records_to_file(self) -> bool:
        return self.flight_recorder and self.log_path is not None


def console_handler(
    level: int, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler writing to stderr.

    In debug mode records show the time, the logger name and the source
    location; otherwise only the level and the message are shown.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=level,
        console=console,
        show_time=debug,
        show_path=debug,
        enable_link_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(
        logging.Formatter("%(name)s: %(message)s" if debug else "%(message)s")
    )
    return handler


def flight_recorder(path: Path, capacity: int, *, force_flush: bool) -> MemoryHandler:
    """Return a memory buffer that dumps into `path` on WARNING.

    The file is truncated when first written and is not created at all if
    nothing is ever flushed.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=force_flush,
    )


def configure_logging(
    settings: LogSettings, *, color: bool = True
) -> list[logging.Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    The root logger passes every record through; each handler applies its
    own level. Per-logger minimum levels from `settings` are applied last.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(settings.console_level, debug=settings.debug, color=color)
    ]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            flight_recorder(
                settings.log_path, settings.capacity, force_flush=settings.force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)

    return handlers


def _describe_page_size() -> str:
    try:
        return str(config.get_default_page_size())
    except config.InvalidPageSizeError as e:
        return f"invalid {config.PAGE_SIZE_ENV_VAR}={e.value!r}"


def log_startup(
    logger: logging.Logger,
    settings: LogSettings,
    handlers: list[logging.Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line summary at INFO and the resolved configuration at DEBUG."""
    logger.info(
        "SEQUTILS %s: console=%s, flight-recorder=%s, page-size=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.records_to_file else "OFF",
        _describe_page_size(),
    )
    logger.debug(
        "Python %s, click %s, click-extra %s, rich %s",
        sys.version.split()[0],
        version("click"),
        version("click-extra"),
        version("rich"),
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.records_to_file:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, force_flush=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    levels = {
        name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()
    }
    logger.debug("Per-logger levels: %s", levels or "<none>")
