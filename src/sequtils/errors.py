"""Error definitions for sequence operations."""


class SequenceError(Exception):
    """Base class for sequence-operation errors."""


class MissingArgumentError(SequenceError, TypeError):
    """Raised when a required sequence, selector, or predicate is ``None``.

    Attributes:
        argument (str): Name of the missing parameter (e.g. "source").
    """

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} cannot be None")
        self.argument = argument


class EmptySequenceError(SequenceError, ValueError):
    """Raised when an operation needs at least one element but got none.

    Attributes:
        argument (str): Name of the empty parameter (e.g. "source").
    """

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must contain at least one element")
        self.argument = argument
