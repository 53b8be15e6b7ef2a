"""CLI helpers for SEQUTILS.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, stderr message emitters with emoji→ASCII fallbacks, ``-L`` option
parsing, and the named selectors/predicates used by the dedup commands.
"""

from .hyperlinks import hyperlink
from .messages import error, warn
from .selectors import EQUALITY_PREDICATES, KEY_SELECTORS

__all__ = [
    "hyperlink",
    "warn",
    "error",
    "KEY_SELECTORS",
    "EQUALITY_PREDICATES",
]
