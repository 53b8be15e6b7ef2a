"""Named key selectors and equality predicates for the dedup commands.

``sequtils distinct --key NAME`` and ``sequtils dedupe --match NAME`` look
their callables up here by name. The commands offer exactly these names as
Click choices, so an unknown name never reaches the lookup.
"""

from collections.abc import Callable
from typing import Any


def _first_word(line: str) -> str:
    words = line.split(maxsplit=1)
    return words[0] if words else ""


def _is_prefix_pair(a: str, b: str) -> bool:
    return a.startswith(b) or b.startswith(a)


def _is_anagram_pair(a: str, b: str) -> bool:
    return sorted(a.replace(" ", "").casefold()) == sorted(b.replace(" ", "").casefold())


KEY_SELECTORS: dict[str, Callable[[str], Any]] = {
    "identity": lambda line: line,
    "casefold": str.casefold,
    "length": len,
    "first-word": _first_word,
}

EQUALITY_PREDICATES: dict[str, Callable[[str, str], bool]] = {
    "casefold": lambda a, b: a.casefold() == b.casefold(),
    "prefix": _is_prefix_pair,
    "anagram": _is_anagram_pair,
}
