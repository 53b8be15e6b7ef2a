"""SEQUTILS

Generic, lazy helpers for working with sequences: wrapping a single value,
dropping the first element, chunking, paging, and deduplicating by key or by
an arbitrary equality predicate. A small ``sequtils`` CLI applies the same
helpers to lines of text.
"""

from .errors import EmptySequenceError, MissingArgumentError, SequenceError
from .sequences import (
    Single,
    as_one,
    distinct_by_key,
    distinct_by_predicate,
    paginate,
    paginate_all,
    partition,
    tail,
    to_unary_sequence,
)

__all__ = [
    "__version__",
    "Single",
    "as_one",
    "to_unary_sequence",
    "tail",
    "partition",
    "paginate",
    "paginate_all",
    "distinct_by_key",
    "distinct_by_predicate",
    "SequenceError",
    "MissingArgumentError",
    "EmptySequenceError",
]
__version__ = "0.1.0"
