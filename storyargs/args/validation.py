"""Options allow-list validation for argument values.

An arg type may declare ``options``; a value for that arg is admitted only
if it is one of them, or, for array values, if every element is. Invalid
keys are dropped from the result rather than raising: persisted state may
predate the current option list and is applied on a best-effort basis.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from storyargs.args.sparse import SparseArray
from storyargs.schemas.story import ArgType
from storyargs.utils.equality import deep_equal


def is_allowed(value: Any, options: Sequence[Any]) -> bool:
    """Return True if ``value`` (or every element of an array value) is an option."""
    if isinstance(value, SparseArray):
        return all(_is_option(item, options) for item in value.values())
    if isinstance(value, list):
        if _is_option(value, options):
            return True
        return all(_is_option(item, options) for item in value)
    return _is_option(value, options)


def _is_option(value: Any, options: Sequence[Any]) -> bool:
    return any(deep_equal(value, option) for option in options)


def validate_options(
    args: Mapping[str, Any],
    arg_types: Mapping[str, ArgType],
) -> dict[str, Any]:
    """Return the subset of ``args`` admitted by their arg types' options.

    Keys whose arg type declares no options (or that have no arg type at
    all) pass through unchanged.
    """
    validated: dict[str, Any] = {}
    for key, value in args.items():
        arg_type = arg_types.get(key)
        if arg_type is None or arg_type.options is None:
            validated[key] = value
            continue
        if is_allowed(value, arg_type.options):
            validated[key] = value
    return validated
