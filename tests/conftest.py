"""Global pytest fixtures and hooks for SEQUTILS."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from tests.helpers.iterables import CountingIterable

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test directory -> default marker for items collected under it
DIRECTORY_MARKERS = {
    "unit": pytest.mark.unit,
    "functional": pytest.mark.functional,
    "e2e": pytest.mark.e2e,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item by the top-level test directory it lives in.

    Items that already carry that marker explicitly are left alone.
    """
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        marker = DIRECTORY_MARKERS.get(top)
        if marker is None:
            continue
        if not any(m.name == marker.name for m in item.iter_markers()):
            item.add_marker(marker)


@pytest.fixture
def counting() -> Callable[[Iterable[int]], CountingIterable[int]]:
    """Factory wrapping items in a `CountingIterable`.

    Example:
        ```py
        def test_lazy(counting):
            source = counting(range(5))
            ...
            assert source.pulled == 0
        ```
    """
    return CountingIterable
