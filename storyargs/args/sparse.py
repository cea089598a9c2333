"""SparseArray — the positions of an array a persisted payload supplied.

Persisted arrays may carry holes: positions the payload did not set,
which must keep whatever the current array holds there. A hole is
written either as ``None`` inside a list, or by omitting the index from
an index -> value mapping (``{"2": "4"}`` as decoded from a query string).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SparseArray:
    """Index -> value mapping of supplied array positions.

    Indexes are non-negative; absent indexes are holes.
    """

    entries: dict[int, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> SparseArray | None:
        """Build a SparseArray from a list/tuple or an index mapping.

        Returns None when ``raw`` cannot describe an array.
        """
        if isinstance(raw, SparseArray):
            return raw
        if isinstance(raw, (list, tuple)):
            return cls({i: v for i, v in enumerate(raw) if v is not None})
        if isinstance(raw, Mapping):
            entries: dict[int, Any] = {}
            for key, value in raw.items():
                index = _parse_index(key)
                if index is None:
                    return None
                if value is not None:
                    entries[index] = value
            return cls(entries)
        return None

    def map(self, fn: Callable[[Any], Any], *, drop: object) -> SparseArray:
        """Apply ``fn`` to every supplied element; results equal to ``drop`` become holes."""
        mapped: dict[int, Any] = {}
        for index, value in self.entries.items():
            result = fn(value)
            if result is not drop:
                mapped[index] = result
        return SparseArray(mapped)

    def items(self) -> Iterator[tuple[int, Any]]:
        """Supplied (index, value) pairs in ascending index order."""
        for index in sorted(self.entries):
            yield index, self.entries[index]

    def values(self) -> list[Any]:
        return [value for _, value in self.items()]

    def __len__(self) -> int:
        return len(self.entries)


def _parse_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None
