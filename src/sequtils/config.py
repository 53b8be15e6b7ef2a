"""Configuration utilities for SEQUTILS.

This module centralizes small helpers and constants related to configuration
read from the environment.
"""

import os

PAGE_SIZE_ENV_VAR = "SEQUTILS_PAGE_SIZE"  # pragma: no mutate
DEFAULT_PAGE_SIZE = 10


class InvalidPageSizeError(Exception):
    """Raised when SEQUTILS_PAGE_SIZE is set to something other than an integer."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{PAGE_SIZE_ENV_VAR} must be an integer, got {value!r}."
        )
        self.value = value


def get_default_page_size() -> int:
    """Get the default page/chunk size from the environment.

    Returns:
        The integer value of `SEQUTILS_PAGE_SIZE`, or `DEFAULT_PAGE_SIZE` when
        the variable is unset or empty. Zero and negative values are returned
        as-is.

    Raises:
        InvalidPageSizeError: If `SEQUTILS_PAGE_SIZE` is not an integer.
    """
    if not (raw := os.environ.get(PAGE_SIZE_ENV_VAR, "").strip()):
        return DEFAULT_PAGE_SIZE
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidPageSizeError(raw) from e
