"""Immutable singly-linked sequences.

This module defines the value type every consfold operation consumes and
produces. A Sequence is either the unique empty terminator ``EMPTY`` or a
``Cell`` holding one element (``head``) and the remaining Sequence
(``rest``). Cells are immutable once built, so any number of sequences may
safely share a common tail.

Traversals in this module are loops rather than recursion so that equality,
hashing, ``repr`` and conversions work on sequences of any length.

Examples:
    >>> from consfold.core import seq, cons, EMPTY, to_list
    >>> numbers = seq(1, 2, 3)
    >>> numbers
    seq(1, 2, 3)
    >>> cons(0, numbers) == seq(0, 1, 2, 3)
    True
    >>> to_list(EMPTY)
    []
"""

from typing import Any, Iterable, Iterator, List, Union

from .errors import NotASequence
from ..logger.logger import logger

__all__ = [
    "Empty",
    "EMPTY",
    "Cell",
    "Sequence",
    "cons",
    "seq",
    "from_iterable",
    "to_list",
    "is_sequence",
    "ensure_sequence",
]


class Empty:
    """The empty sequence. ``EMPTY`` is its only instance."""

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


class Cell:
    """A non-empty sequence: one element followed by the rest of the sequence.

    Attributes:
        head: The first element.
        rest: The remaining Sequence (``EMPTY`` for a one-element sequence).

    Raises:
        NotASequence: If ``rest`` is not a Sequence.
    """

    __slots__ = ("head", "rest")

    def __init__(self, head: Any, rest: "Sequence" = EMPTY) -> None:
        if not isinstance(rest, (Cell, Empty)):
            raise NotASequence("rest", rest)
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "rest", rest)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Cell is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cell is immutable, cannot delete '{name}'")

    def __reduce__(self):
        # Rebuilt from a flat tuple; slot assignment is blocked by __setattr__
        return (from_iterable, (tuple(self),))

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Any]:
        node = self
        while isinstance(node, Cell):
            yield node.head
            node = node.rest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Cell, Empty)):
            return NotImplemented
        left, right = self, other
        while isinstance(left, Cell) and isinstance(right, Cell):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.rest, right.rest
        return left is right

    def __hash__(self) -> int:
        result = hash(Cell)
        for element in self:
            result = hash((result, element))
        return result

    def __repr__(self) -> str:
        return "seq(" + ", ".join(repr(element) for element in self) + ")"


Sequence = Union[Cell, Empty]


def cons(head: Any, rest: Sequence) -> Cell:
    """Prepend ``head`` to ``rest``."""
    return Cell(head, rest)


def is_sequence(value: Any) -> bool:
    """Return True if ``value`` is a Sequence (``EMPTY`` or a ``Cell``)."""
    return isinstance(value, (Cell, Empty))


def ensure_sequence(value: Any, argument: str = "sequence") -> Sequence:
    """Validate that ``value`` is a Sequence.

    Args:
        value: Object to check.
        argument: Parameter name reported in the error.

    Returns:
        ``value`` unchanged.

    Raises:
        NotASequence: If ``value`` is not a Sequence.
    """
    if not is_sequence(value):
        logger.debug(f"Rejected {argument}: {type(value).__name__} is not a Sequence")
        raise NotASequence(argument, value)
    return value


def from_iterable(items: Iterable[Any]) -> Sequence:
    """Build a Sequence holding the elements of a finite iterable, in order.

    Args:
        items: Any finite Python iterable (list, tuple, generator, ...).

    Returns:
        The corresponding Sequence; ``EMPTY`` for an empty iterable.

    Raises:
        NotASequence: If ``items`` is not iterable.
    """
    try:
        iterator = iter(items)
    except TypeError:
        raise NotASequence("items", items) from None

    # Prepend while reading, then flip the chain back into order
    backwards: Sequence = EMPTY
    for element in iterator:
        backwards = Cell(element, backwards)

    result: Sequence = EMPTY
    while isinstance(backwards, Cell):
        result = Cell(backwards.head, result)
        backwards = backwards.rest
    return result


def seq(*items: Any) -> Sequence:
    """Build a Sequence from positional arguments: ``seq(1, 2, 3)``."""
    return from_iterable(items)


def to_list(sequence: Sequence) -> List[Any]:
    """Convert a Sequence into a Python list, preserving order.

    Raises:
        NotASequence: If ``sequence`` is not a Sequence.
    """
    ensure_sequence(sequence)
    result = []
    node = sequence
    while isinstance(node, Cell):
        result.append(node.head)
        node = node.rest
    return result
