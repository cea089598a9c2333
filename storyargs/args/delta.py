"""Delta between a story's declared initial args and its current args.

Used on implementation change: the keys a user changed since the last
reset are carried over onto the regenerated initial args, and every
other key follows the new defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storyargs.utils.equality import deep_equal


def changed_keys(previous_initial: Mapping[str, Any], current: Mapping[str, Any]) -> list[str]:
    """Keys of ``current`` that differ from ``previous_initial``.

    A key missing from ``previous_initial`` counts as changed. A key
    present only in ``previous_initial`` is never reported.
    """
    return [
        key
        for key, value in current.items()
        if key not in previous_initial or not deep_equal(value, previous_initial[key])
    ]


def args_delta(previous_initial: Mapping[str, Any], current: Mapping[str, Any]) -> dict[str, Any]:
    """Changed keys of ``current`` mapped to their current values."""
    return {key: current[key] for key in changed_keys(previous_initial, current)}


def apply_delta(new_initial: Mapping[str, Any], delta: Mapping[str, Any]) -> dict[str, Any]:
    """New initial args with every delta key overwritten or added.

    Values are taken as-is; callers copy before storing.
    """
    result = dict(new_initial)
    result.update(delta)
    return result
