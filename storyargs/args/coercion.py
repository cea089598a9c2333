"""Coerce persisted argument values to their declared types.

Persisted values arrive from untrusted, possibly stale sources (URL query
strings, saved sessions) and are usually strings. Each value is mapped
according to its argument's type descriptor; values that cannot be mapped
are INCOMPATIBLE and the caller drops them.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from storyargs.args.sparse import SparseArray
from storyargs.schemas.story import (
    ArgType,
    ArrayType,
    EnumType,
    ObjectType,
    ScalarType,
    TypeDescriptor,
)


class _Incompatible:
    """Marker for a value that cannot be coerced to its descriptor."""

    def __repr__(self) -> str:
        return "INCOMPATIBLE"


INCOMPATIBLE = _Incompatible()

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY = re.compile(r"([+-]?)Infinity")


def map_args_to_types(
    args: Mapping[str, Any],
    arg_types: Mapping[str, ArgType],
) -> dict[str, Any]:
    """Coerce each arg to its declared type.

    Keys without an arg type (or whose arg type declares no shape), and values incompatible with theirs, are
    left out of the result. Array values come back as SparseArray.
    """
    mapped: dict[str, Any] = {}
    for key, value in args.items():
        arg_type = arg_types.get(key)
        if arg_type is None or arg_type.type is None:
            continue
        result = map_value(value, arg_type.type)
        if result is not INCOMPATIBLE:
            mapped[key] = result
    return mapped


def map_value(value: Any, descriptor: TypeDescriptor) -> Any:
    """Coerce a single value, returning INCOMPATIBLE on failure."""
    if isinstance(descriptor, ScalarType):
        if descriptor.name == "string":
            return _to_string(value)
        if descriptor.name == "number":
            return _to_number(value)
        return _to_boolean(value)

    if isinstance(descriptor, EnumType):
        return value

    if isinstance(descriptor, ObjectType):
        if descriptor.value is None:
            return INCOMPATIBLE
        if not isinstance(value, Mapping):
            return INCOMPATIBLE
        result: dict[str, Any] = {}
        for key, item in value.items():
            mapped = map_value(item, descriptor.value)
            if mapped is not INCOMPATIBLE:
                result[key] = mapped
        return result

    if isinstance(descriptor, ArrayType):
        if descriptor.value is None:
            return INCOMPATIBLE
        sparse = SparseArray.from_raw(value)
        if sparse is None:
            return INCOMPATIBLE
        element_type = descriptor.value
        return sparse.map(lambda item: map_value(item, element_type), drop=INCOMPATIBLE)

    # function, symbol, union and any other tag
    return INCOMPATIBLE


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def _to_string(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, (str, int)):
        return str(value)
    return INCOMPATIBLE


def _to_number(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return INCOMPATIBLE if isinstance(value, float) and math.isnan(value) else value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
        if _DECIMAL.fullmatch(text):
            return float(text)
        infinity = _INFINITY.fullmatch(text)
        if infinity:
            return -math.inf if infinity.group(1) == "-" else math.inf
        return INCOMPATIBLE
    return INCOMPATIBLE


def _to_boolean(value: Any) -> bool:
    return value is True or value == "true"
