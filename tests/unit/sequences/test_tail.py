"""Unit tests for sequtils.sequences.tail."""

import pytest

from sequtils.errors import EmptySequenceError
from sequtils.sequences import tail
from tests.helpers.iterables import one_shot

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "source, expected",
    [
        ([1], []),
        ([1, 2], [2]),
        ([1, 2, 3, 4], [2, 3, 4]),
        ("abc", ["b", "c"]),
        (range(5), [1, 2, 3, 4]),
    ],
)
def test_tail_drops_first_element(source, expected):
    """tail returns everything after the first element, in order."""
    assert list(tail(source)) == expected


@pytest.mark.parametrize("source", [[], (), "", range(0)])
def test_tail_of_empty_source_raises(source):
    """An empty source raises EmptySequenceError naming the argument."""
    with pytest.raises(EmptySequenceError, match="source must contain at least one element") as exc:
        tail(source)
    assert exc.value.argument == "source"


def test_tail_raises_eagerly_for_empty_generator():
    """The empty check happens at call time, not on first iteration."""
    with pytest.raises(EmptySequenceError):
        tail(one_shot([]))


def test_tail_empty_error_is_a_value_error():
    """Callers may catch the stdlib ValueError."""
    with pytest.raises(ValueError):
        tail([])


def test_tail_consumes_one_shot_source_once():
    """A generator is not restarted: the tail continues where the check stopped."""
    gen = one_shot([10, 20, 30])
    assert list(tail(gen)) == [20, 30]
    assert not list(gen)


def test_tail_pulls_only_the_first_element_up_front(counting):
    """Only the first element is consumed before the caller iterates."""
    source = counting([1, 2, 3])
    rest = tail(source)
    assert source.iterations == 1
    assert source.pulled == 1
    assert next(rest) == 2
    assert source.pulled == 2


def test_tail_does_not_mutate_source():
    """The source list is left untouched."""
    source = [1, 2, 3]
    list(tail(source))
    assert source == [1, 2, 3]
