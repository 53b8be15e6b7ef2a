"""Generic helpers for slicing, chunking and deduplicating sequences.

Every helper accepts any iterable (lists, tuples, ranges, generators, ...)
and never mutates it. Results are lazy: elements are pulled from the source
only as the caller iterates the result.

Argument checks (``None`` sources, selectors and predicates, empty input for
`tail`) happen when the helper is *called*, not when the returned iterator
is first advanced. To keep that guarantee, helpers that validate are plain
functions returning an inner generator.

Helpers that take no validation on purpose:

* `as_one` and `to_unary_sequence` accept any value, including ``None``.
* `paginate` clamps negative offsets and sizes instead of raising.
* `partition` and `paginate_all` treat a non-positive size as "one chunk
  holding the whole source".
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Generic, TypeVar

from .errors import EmptySequenceError, MissingArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")

__all__ = [
    "Single",
    "as_one",
    "to_unary_sequence",
    "tail",
    "partition",
    "paginate",
    "paginate_all",
    "distinct_by_key",
    "distinct_by_predicate",
]


# ============================================================================
#                               Single element
# ============================================================================


@dataclass(frozen=True, slots=True)
class Single(Generic[T]):
    """Restartable view over exactly one element.

    Each call to ``iter()`` yields `element` once, so the view can be
    iterated any number of times.
    """

    element: T

    def __iter__(self) -> Iterator[T]:
        yield self.element

    def __len__(self) -> int:
        return 1

    def __contains__(self, item: object) -> bool:
        return item == self.element


def as_one(element: T) -> Single[T]:
    """Wrap a single value into a one-element sequence.

    Args:
        element: The value to wrap. ``None`` is a valid value.

    Returns:
        A restartable `Single` view yielding `element` once per iteration.

    Example:
        >>> list(as_one(42))
        [42]
    """
    return Single(element)


def to_unary_sequence(element: T) -> Iterator[T]:
    """Yield `element` exactly once (one-shot form of `as_one`)."""
    yield element


# ============================================================================
#                               Slicing
# ============================================================================


def tail(source: Iterable[T]) -> Iterator[T]:
    """Return every element of `source` except the first.

    The first element is consumed immediately to check that `source` is not
    empty. The returned iterator continues from the same underlying
    iterator, so one-shot sources (generators, file objects) are only
    traversed once.

    Args:
        source: The sequence to drop the first element from.

    Returns:
        Iterator over the remaining elements, in order.

    Raises:
        EmptySequenceError: If `source` has no elements.
    """
    iterator = iter(source)
    try:
        next(iterator)
    except StopIteration:
        logger.debug("tail: source is empty")
        raise EmptySequenceError("source") from None
    return iterator


def paginate(source: Iterable[T], page_size: int, page_number: int) -> Iterator[T]:
    """Return the zero-indexed page `page_number` of `source`.

    The page starts at offset ``page_number * page_size`` and holds up to
    `page_size` elements. Arguments are not validated: a negative offset
    skips nothing, a non-positive `page_size` takes nothing, and a page past
    the end of `source` is empty.

    Args:
        source: The sequence to page through.
        page_size: Number of elements per page.
        page_number: Zero-based page index.

    Returns:
        Iterator over the elements of the requested page.

    Example:
        >>> list(paginate(range(1, 11), 3, 1))
        [4, 5, 6]
    """
    start = max(page_number * page_size, 0)
    if start > sys.maxsize:
        # islice cannot skip more than sys.maxsize elements
        return iter(())
    stop = min(start + max(page_size, 0), sys.maxsize)
    return islice(source, start, stop)


# ============================================================================
#                               Chunking
# ============================================================================


def partition(source: Iterable[T] | None, size: int) -> Iterator[list[T]]:
    """Split `source` into consecutive chunks of `size` elements.

    Every chunk holds exactly `size` elements except possibly the last one,
    which holds the remainder. An empty `source` yields no chunks.

    When `size` is zero or negative, the whole of `source` is yielded as a
    single chunk (an empty list for an empty source). This is not an error.

    Each chunk is a new list, so chunk boundaries stay stable no matter how
    often the caller iterates a chunk.

    Args:
        source: The sequence to split. Must not be ``None``.
        size: Maximum number of elements per chunk.

    Returns:
        Lazy iterator over the chunks.

    Raises:
        MissingArgumentError: If `source` is ``None``.

    Example:
        >>> list(partition([1, 2, 3, 4, 5], 2))
        [[1, 2], [3, 4], [5]]
    """
    if source is None:
        logger.debug("partition: source is None")
        raise MissingArgumentError("source")
    if size <= 0:
        logger.debug("partition: size=%d is not positive; using a single chunk", size)
        return _whole(source)
    return _chunks(source, size)


def _whole(source: Iterable[T]) -> Iterator[list[T]]:
    yield list(source)


def _chunks(source: Iterable[T], size: int) -> Iterator[list[T]]:
    iterator = iter(source)
    size = min(size, sys.maxsize)
    while chunk := list(islice(iterator, size)):
        yield chunk


def paginate_all(source: Iterable[T] | None, page_length: int) -> Iterator[list[T]]:
    """Split `source` into pages of `page_length` elements.

    Same as `partition`, including the non-positive length policy.

    Raises:
        MissingArgumentError: If `source` is ``None``.
    """
    return partition(source, page_length)


# ============================================================================
#                               Deduplication
# ============================================================================


def distinct_by_key(
    source: Iterable[T] | None, key: Callable[[T], K] | None
) -> Iterator[T]:
    """Keep the first element of `source` for each distinct ``key(element)``.

    Keys are compared with ``==``. Hashable keys are tracked in a set;
    unhashable keys (lists, dicts, ...) are compared one by one against the
    unhashable keys seen so far.

    Args:
        source: The sequence to deduplicate. Must not be ``None``.
        key: Function deriving the comparison key. Must not be ``None``.

    Returns:
        Lazy iterator over the retained elements, in original order.

    Raises:
        MissingArgumentError: If `source` or `key` is ``None``.

    Example:
        >>> list(distinct_by_key(["a", "bb", "cc", "d"], len))
        ['a', 'bb']
    """
    if source is None:
        logger.debug("distinct_by_key: source is None")
        raise MissingArgumentError("source")
    if key is None:
        logger.debug("distinct_by_key: key is None")
        raise MissingArgumentError("key")
    return _distinct_by_key(source, key)


def _distinct_by_key(source: Iterable[T], key: Callable[[T], Any]) -> Iterator[T]:
    seen: set[Hashable] = set()
    seen_unhashable: list[Any] = []
    for element in source:
        marker = key(element)
        try:
            if marker in seen:
                continue
            seen.add(marker)
        except TypeError:
            if marker in seen_unhashable:
                continue
            seen_unhashable.append(marker)
        yield element


def distinct_by_predicate(
    source: Iterable[T] | None, equals: Callable[[T, T], bool] | None
) -> Iterator[T]:
    """Keep the first element of `source` for each class under `equals`.

    Each candidate is checked against every element retained so far with
    ``equals(retained, candidate)``; it is kept only when no retained element
    matches. This is quadratic in the worst case. `equals` need not be
    consistent with any hash, so no hashing is done.

    Args:
        source: The sequence to deduplicate. Must not be ``None``.
        equals: Binary predicate deciding whether two elements are equal.
            Must not be ``None``.

    Returns:
        Lazy iterator over the retained elements, in original order.

    Raises:
        MissingArgumentError: If `source` or `equals` is ``None``.
    """
    if source is None:
        logger.debug("distinct_by_predicate: source is None")
        raise MissingArgumentError("source")
    if equals is None:
        logger.debug("distinct_by_predicate: equals is None")
        raise MissingArgumentError("equals")
    return _distinct_by_predicate(source, equals)


def _distinct_by_predicate(
    source: Iterable[T], equals: Callable[[T, T], bool]
) -> Iterator[T]:
    retained: list[T] = []
    for candidate in source:
        if any(equals(kept, candidate) for kept in retained):
            continue
        retained.append(candidate)
        yield candidate
