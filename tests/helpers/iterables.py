"""Iterable doubles for checking laziness and single-pass behavior."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class CountingIterable(Generic[T]):
    """Re-iterable wrapper that records how it is consumed.

    Attributes:
        iterations: Number of times ``iter()`` was called.
        pulled: Total number of elements handed out across all iterations.
    """

    def __init__(self, items: Iterable[T]) -> None:
        self._items = list(items)
        self.iterations = 0
        self.pulled = 0

    def __iter__(self) -> Iterator[T]:
        self.iterations += 1
        for item in self._items:
            self.pulled += 1
            yield item


def one_shot(items: Iterable[T]) -> Iterator[T]:
    """Return a generator over `items` that can only be consumed once."""
    yield from items
