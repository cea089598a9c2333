"""Combine coerced persisted values with the current argument values.

Mappings merge key by key, recursively. Sparse arrays overwrite only the
positions they supply. Everything else replaces the current value.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from storyargs.args.sparse import SparseArray


def combine_args(value: Any, update: Any) -> Any:
    """Merge ``update`` onto ``value`` and return a new value.

    - SparseArray update: positions it supplies are combined with the
      existing element, others keep the existing element. The result is
      never shorter than the existing list, and every supplied position
      lands at its own index, with None filling any gap past the end.
    - Mapping update onto a mapping: keys only in ``value`` are kept,
      keys in ``update`` are combined recursively.
    - Anything else: ``update`` wins.

    Neither argument is mutated, and the result shares no containers
    with ``update``.
    """
    if isinstance(update, SparseArray):
        existing = value if isinstance(value, list) else []
        result = [copy.deepcopy(item) for item in existing]
        for index, item in update.items():
            if index >= len(result):
                result.extend([None] * (index + 1 - len(result)))
            result[index] = combine_args(result[index], item)
        return result

    if isinstance(update, Mapping):
        base = value if isinstance(value, Mapping) else {}
        merged = {key: copy.deepcopy(item) for key, item in base.items()}
        for key, item in update.items():
            merged[key] = combine_args(base.get(key), item)
        return merged

    return copy.deepcopy(update)


def combine_all(current: Mapping[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """Combine every key of ``updates`` with the same key of ``current``.

    Returns only the combined keys, ready for a shallow per-key update.
    """
    return {key: combine_args(current.get(key), update) for key, update in updates.items()}
