"""List operations over immutable linked sequences.

This module implements the classic list primitives from first principles on
top of :mod:`consfold.core.sequence`. None of them relies on Python's own
collection helpers (``map``, ``filter``, ``functools.reduce``, ``reversed``,
slicing or ``len``); each walks the cells directly.

Operations:
    - **append**: all elements of one sequence followed by another
    - **concatenate**: depth-one flattening of a sequence of sequences
    - **filter**: elements satisfying a predicate, in order
    - **list_count**: number of elements
    - **map**: element-wise transformation
    - **left_fold**: reduction from the first element to the last
    - **right_fold**: reduction from the last element to the first
    - **reverse**: elements in opposite order

Note:
    Operations that naturally recurse on the tail (append, concatenate, filter,
    map) are written as loops that prepend onto an accumulator and then flip it
    with the same reverse-onto step ``reverse`` uses. Python has no tail-call
    elimination, so this keeps every operation at constant stack depth
    regardless of input length.

    Inputs are never modified. Results may share cells with an input where the
    contents are identical (``append`` reuses its second argument).

Examples:
    >>> from consfold.core import seq
    >>> from consfold.functional import append, left_fold, right_fold
    >>> append(seq(1, 2), seq(3))
    seq(1, 2, 3)
    >>> left_fold(seq(1, 2, 3), "", lambda x, acc: acc + str(x))
    '123'
    >>> right_fold(seq(1, 2, 3), "", lambda x, acc: acc + str(x))
    '321'
"""

from typing import Any

from consfold import config
from consfold.core.sequence import EMPTY, Cell, Sequence, ensure_sequence, is_sequence
from consfold.core.types import Combine, Count, Predicate, Transform
from consfold.logger.logger import logger

__all__ = [
    "append",
    "concatenate",
    "filter",
    "list_count",
    "map",
    "left_fold",
    "right_fold",
    "reverse",
]


def _ensure_callable(function: Any, argument: str) -> None:
    if not callable(function):
        raise TypeError(
            f"{argument} must be callable, got {type(function).__name__}"
        )


def _reverse_onto(sequence: Sequence, tail: Sequence) -> Sequence:
    """Prepend the elements of ``sequence`` to ``tail`` in reverse order."""
    result = tail
    node = sequence
    while isinstance(node, Cell):
        result = Cell(node.head, result)
        node = node.rest
    return result


def append(first: Sequence, second: Sequence) -> Sequence:
    """Return all elements of ``first`` followed by all elements of ``second``.

    Only ``first`` is rebuilt; the result ends in the cells of ``second``. If
    ``first`` is empty the result is ``second`` itself.

    Args:
        first: Leading sequence.
        second: Trailing sequence.

    Returns:
        A sequence of length ``list_count(first) + list_count(second)``.

    Raises:
        NotASequence: If an argument is not a Sequence. With
            ``STRICT_APPEND`` disabled, a call is rejected up front only when
            neither argument is a Sequence; otherwise the non-Sequence argument
            is reported when the traversal reaches it.
    """
    logger.debug("append")
    if config.settings.STRICT_APPEND:
        ensure_sequence(first, "first")
        ensure_sequence(second, "second")
    elif not (is_sequence(first) or is_sequence(second)):
        ensure_sequence(first, "first")
    elif not (is_sequence(first) and is_sequence(second)):
        logger.warning("append called with a non-Sequence argument")

    if first is EMPTY:
        return second
    ensure_sequence(first, "first")
    ensure_sequence(second, "second")
    return _reverse_onto(_reverse_onto(first, EMPTY), second)


def concatenate(sequences: Sequence) -> Sequence:
    """Flatten a sequence of sequences by one level.

    Elements keep their relative order within and across the inner sequences;
    empty inner sequences contribute nothing.

    Args:
        sequences: A Sequence whose elements are themselves Sequences.

    Returns:
        The flattened sequence; ``EMPTY`` when ``sequences`` is empty.

    Raises:
        NotASequence: If ``sequences`` or any of its elements is not a
            Sequence. Elements are not coerced (a Python list inside is an
            error, not a sequence).
    """
    logger.debug("concatenate")
    ensure_sequence(sequences, "sequences")

    backwards: Sequence = EMPTY
    outer = sequences
    index = 0
    while isinstance(outer, Cell):
        inner = ensure_sequence(outer.head, f"sequences[{index}]")
        backwards = _reverse_onto(inner, backwards)
        outer = outer.rest
        index += 1
    return _reverse_onto(backwards, EMPTY)


def filter(sequence: Sequence, predicate: Predicate) -> Sequence:
    """Return the elements of ``sequence`` for which ``predicate`` is true.

    Args:
        sequence: Input sequence.
        predicate: Called once per element, in order.

    Returns:
        A sequence of the selected elements in their original order.

    Raises:
        NotASequence: If ``sequence`` is not a Sequence.
        TypeError: If ``predicate`` is not callable.
    """
    logger.debug("filter")
    ensure_sequence(sequence)
    _ensure_callable(predicate, "predicate")

    kept: Sequence = EMPTY
    node = sequence
    while isinstance(node, Cell):
        if predicate(node.head):
            kept = Cell(node.head, kept)
        node = node.rest
    return _reverse_onto(kept, EMPTY)


def list_count(sequence: Sequence) -> Count:
    """Return the number of elements in ``sequence``.

    Raises:
        NotASequence: If ``sequence`` is not a Sequence.
    """
    logger.debug("list_count")
    ensure_sequence(sequence)

    count = 0
    node = sequence
    while isinstance(node, Cell):
        count += 1
        node = node.rest
    return count


def map(sequence: Sequence, transform: Transform) -> Sequence:
    """Apply ``transform`` to every element, preserving order and length.

    Args:
        sequence: Input sequence.
        transform: Called once per element, first to last.

    Returns:
        A sequence of the transformed elements.

    Raises:
        NotASequence: If ``sequence`` is not a Sequence.
        TypeError: If ``transform`` is not callable.
    """
    logger.debug("map")
    ensure_sequence(sequence)
    _ensure_callable(transform, "transform")

    mapped: Sequence = EMPTY
    node = sequence
    while isinstance(node, Cell):
        mapped = Cell(transform(node.head), mapped)
        node = node.rest
    return _reverse_onto(mapped, EMPTY)


def left_fold(sequence: Sequence, initial: Any, combine: Combine) -> Any:
    """Reduce ``sequence`` from its first element to its last.

    The first element is combined with ``initial``, each following element
    with the previous result: ``combine(x3, combine(x2, combine(x1, initial)))``.

    Args:
        sequence: Input sequence.
        initial: Starting accumulator, returned unchanged for an empty sequence.
        combine: Called as ``combine(element, accumulator)``.

    Returns:
        The final accumulator.

    Raises:
        NotASequence: If ``sequence`` is not a Sequence.
        TypeError: If ``combine`` is not callable.
    """
    logger.debug("left_fold")
    ensure_sequence(sequence)
    _ensure_callable(combine, "combine")

    accumulator = initial
    node = sequence
    while isinstance(node, Cell):
        accumulator = combine(node.head, accumulator)
        node = node.rest
    return accumulator


def right_fold(sequence: Sequence, initial: Any, combine: Combine) -> Any:
    """Reduce ``sequence`` from its last element to its first.

    The last element is combined with ``initial`` and the first element's
    combination is the result: ``combine(x1, combine(x2, combine(x3, initial)))``.
    Computed as a left fold over the reversed sequence.

    Args:
        sequence: Input sequence.
        initial: Starting accumulator, returned unchanged for an empty sequence.
        combine: Called as ``combine(element, accumulator)``.

    Returns:
        The final accumulator.

    Raises:
        NotASequence: If ``sequence`` is not a Sequence.
        TypeError: If ``combine`` is not callable.
    """
    logger.debug("right_fold")
    ensure_sequence(sequence)
    _ensure_callable(combine, "combine")
    return left_fold(reverse(sequence), initial, combine)


def reverse(sequence: Sequence) -> Sequence:
    """Return the elements of ``sequence`` in opposite order.

    Raises:
        NotASequence: If ``sequence`` is not a Sequence.
    """
    logger.debug("reverse")
    ensure_sequence(sequence)
    return _reverse_onto(sequence, EMPTY)
