"""Fixtures and test helpers for end-to-end CLI logging tests.

Provides a test-only `log-demo` Click command that emits log messages at every
level, plus fixtures to register that command, obtain a CliRunner, and run
tests within an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from sequtils.entrypoints.cli.main import sequtils

# pylint: disable=redefined-outer-name

DEMO_LOGGERS = ("sequtils.demo", "some.thirdparty")


@click.command()
def log_demo():
    """Emit one message per level on a project logger and a third-party logger."""
    logger = logging.getLogger("sequtils.demo")
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
    """Remove a command from a Click group and any section registries it keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `sequtils` for the duration of a test.

    Levels set with -L stick to the process-wide loggers, so the demo loggers
    are reset afterwards.
    """
    sequtils.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(sequtils, "log-demo")
        for name in DEMO_LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
