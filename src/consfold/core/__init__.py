"""Core data structures for immutable linked sequences."""

from consfold.core.errors import NotASequence
from consfold.core.sequence import (
    EMPTY,
    Cell,
    Empty,
    Sequence,
    cons,
    ensure_sequence,
    from_iterable,
    is_sequence,
    seq,
    to_list,
)

__all__ = [
    "NotASequence",
    "EMPTY",
    "Cell",
    "Empty",
    "Sequence",
    "cons",
    "ensure_sequence",
    "from_iterable",
    "is_sequence",
    "seq",
    "to_list",
]
