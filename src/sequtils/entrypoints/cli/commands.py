"""SEQUTILS sequence commands.

Each command applies one helper from `sequtils.sequences` to the lines of a
text file (or stdin when SOURCE is ``-`` or omitted) and writes the result to
stdout. Trailing newlines are stripped from input lines.

Output
- Flat results (``one``, ``tail``, ``page``, ``distinct``, ``dedupe``) print
  one element per line.
- Chunked results (``chunk``, ``pages``) print one JSON array per line so
  that empty strings and chunk boundaries survive the round trip.

Failure modes
- ``tail`` on empty input → error on stderr, exit code 1.
- ``SEQUTILS_PAGE_SIZE`` set to a non-integer → ``ClickException``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, TextIO

import click

from sequtils import config, sequences
from sequtils.errors import EmptySequenceError

from .helpers import (
    EQUALITY_PREDICATES,
    KEY_SELECTORS,
    error,
    warn,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

EMPTY_INPUT_MSG = "tail needs at least one input line, but the input was empty."

NON_POSITIVE_SIZE_MSG = (
    "Size {size} is not positive; emitting all input as a single chunk."
)

source_argument = click.argument(
    "source", type=click.File("r", encoding="utf-8"), default="-"
)

size_option = click.option(
    "--size",
    "-s",
    "size",
    type=int,
    default=None,
    help=(
        "Number of lines per chunk/page. Defaults to SEQUTILS_PAGE_SIZE, "
        f"or {config.DEFAULT_PAGE_SIZE} when unset."
    ),
)


def _read_lines(source: TextIO) -> Iterator[str]:
    for line in source:
        yield line.rstrip("\r\n")


def _resolve_size(size: int | None) -> int:
    if size is not None:
        return size
    try:
        return config.get_default_page_size()
    except config.InvalidPageSizeError as e:
        raise click.ClickException(str(e)) from e


def _echo_lines(elements: Iterable[str]) -> int:
    count = 0
    for element in elements:
        click.echo(element)
        count += 1
    return count


def _echo_chunks(chunks: Iterable[list[str]]) -> int:
    count = 0
    for group in chunks:
        click.echo(json.dumps(group, ensure_ascii=False))
        count += 1
    return count


@click.command()
@click.argument("value")
def one(value: str) -> None:
    """Print VALUE as a one-element sequence."""
    _echo_lines(sequences.as_one(value))


@click.command()
@source_argument
@click.pass_context
def tail(ctx: click.Context, source: TextIO) -> None:
    """Print every line of SOURCE except the first."""
    try:
        remaining = sequences.tail(_read_lines(source))
    except EmptySequenceError:
        error(EMPTY_INPUT_MSG)
        ctx.exit(1)
    count = _echo_lines(remaining)
    logger.info("tail: emitted %d line(s)", count)


@click.command()
@source_argument
@size_option
def chunk(source: TextIO, size: int | None) -> None:
    """Split SOURCE into chunks of --size lines (one JSON array per chunk)."""
    size = _resolve_size(size)
    if size <= 0:
        warn(NON_POSITIVE_SIZE_MSG.format(size=size))
    count = _echo_chunks(sequences.partition(_read_lines(source), size))
    logger.info("chunk: emitted %d chunk(s) of up to %d line(s)", count, size)


@click.command()
@source_argument
@size_option
@click.option(
    "--number",
    "-n",
    "number",
    type=int,
    default=0,
    show_default=True,
    help="Zero-based page index.",
)
def page(source: TextIO, size: int | None, number: int) -> None:
    """Print page --number of SOURCE, --size lines per page."""
    size = _resolve_size(size)
    logger.debug("page: size=%d, number=%d", size, number)
    count = _echo_lines(sequences.paginate(_read_lines(source), size, number))
    logger.info("page: emitted %d line(s)", count)


@click.command()
@source_argument
@size_option
def pages(source: TextIO, size: int | None) -> None:
    """Print every page of SOURCE (one JSON array per page)."""
    size = _resolve_size(size)
    if size <= 0:
        warn(NON_POSITIVE_SIZE_MSG.format(size=size))
    count = _echo_chunks(sequences.paginate_all(_read_lines(source), size))
    logger.info("pages: emitted %d page(s)", count)


@click.command()
@source_argument
@click.option(
    "--key",
    "-k",
    "key_name",
    type=click.Choice(sorted(KEY_SELECTORS)),
    default="identity",
    show_default=True,
    help="Derived key two lines must share to count as duplicates.",
)
def distinct(source: TextIO, key_name: str) -> None:
    """Print the first line of SOURCE for each distinct --key."""
    kept = sequences.distinct_by_key(_read_lines(source), KEY_SELECTORS[key_name])
    count = _echo_lines(kept)
    logger.info("distinct: kept %d line(s) by %s", count, key_name)


@click.command()
@source_argument
@click.option(
    "--match",
    "-m",
    "match_name",
    type=click.Choice(sorted(EQUALITY_PREDICATES)),
    default="casefold",
    show_default=True,
    help="Predicate deciding whether two lines are duplicates.",
)
def dedupe(source: TextIO, match_name: str) -> None:
    """Print the first line of SOURCE for each group of --match equal lines.

    Every line is compared against all lines kept so far, so large inputs
    with few duplicates are slow.
    """
    kept = sequences.distinct_by_predicate(
        _read_lines(source), EQUALITY_PREDICATES[match_name]
    )
    count = _echo_lines(kept)
    logger.info("dedupe: kept %d line(s) by %s", count, match_name)


ALL_COMMANDS = (one, tail, chunk, page, pages, distinct, dedupe)
