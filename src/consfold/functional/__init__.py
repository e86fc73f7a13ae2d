"""Functional primitives for consfold.

This module provides the list operations of the project: append, concatenate,
filter, count, map, the two folds and reverse. They are stateless and
side-effect-free, take immutable sequences and return new ones, so they can be
composed freely.
"""

from consfold.functional.operations import (
    append,
    concatenate,
    filter,
    left_fold,
    list_count,
    map,
    reverse,
    right_fold,
)

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
