"""Reusable type definitions for consfold.

Type Aliases:
    Predicate: Caller-supplied test applied to each element.
    Transform: Caller-supplied element-wise conversion.
    Combine: Caller-supplied fold step, always called as ``combine(element, acc)``.
    Count: A non-negative element count, as returned by ``list_count``.

The ``annotated_types`` bound on ``Count`` documents the return contract for
readers and static tools; it is not checked at runtime.
"""

from typing import Annotated, Any, Callable

import annotated_types as at

__all__ = ["Predicate", "Transform", "Combine", "Count"]

Predicate = Callable[[Any], bool]
Transform = Callable[[Any], Any]
Combine = Callable[[Any, Any], Any]

# Number of elements in a sequence, never negative
Count = Annotated[int, at.Ge(0)]
