"""Structural equality for JSON-like argument values.

Python's ``==`` already compares containers element-wise, but treats
``True == 1`` and ``(1,) != [1]``. Argument values come from JSON-like
sources, so booleans must stay distinct from numbers and any sequence
compares with any other sequence.
"""

from collections.abc import Mapping, Sequence
from typing import Any


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def deep_equal(left: Any, right: Any) -> bool:
    """Return True if two argument values are structurally equal.

    Args:
        left: Any JSON-like value (primitive, mapping, or sequence).
        right: Any JSON-like value.

    Returns:
        True when both values have the same shape and leaf values.
    """
    if left is right:
        return True

    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[key], right[key]) for key in left)

    if _is_sequence(left) and _is_sequence(right):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, Mapping) or isinstance(right, Mapping):
        return False
    if _is_sequence(left) or _is_sequence(right):
        return False

    return left == right
