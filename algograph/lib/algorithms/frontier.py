"""Min-priority frontier with lazy invalidation."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Any, Generic, Hashable, List, Tuple, TypeVar

from algograph.lib.algorithms.base import Cost

T = TypeVar("T", bound=Hashable)


class PriorityFrontier(Generic[T]):
    """
    Min-priority queue over items keyed by a caller-owned mutable key map.

    ``keys`` is read, never written: a list indexed by vertex ID or a dict
    keyed by item. ``push`` snapshots the item's current key. Callers lower a
    key by updating ``keys`` and pushing the item again instead of decreasing
    it in place; the older entry is then stale (its snapshot no longer equals
    the live key) and ``pop`` discards it.

    Ties on key are broken by the item itself, so the smallest vertex ID (or
    the first cell in row-major order) wins.
    """

    __slots__ = ("_keys", "_heap")

    def __init__(self, keys: Any) -> None:
        self._keys = keys
        self._heap: List[Tuple[Cost, T]] = []

    def __len__(self) -> int:
        """Number of stored entries, live and stale."""
        return len(self._heap)

    def __bool__(self) -> bool:
        """True if at least one live entry remains."""
        self._prune()
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityFrontier(entries={len(self._heap)})"

    def _is_live(self, entry: Tuple[Cost, T]) -> bool:
        key, item = entry
        return key == self._keys[item]

    def _prune(self) -> None:
        heap = self._heap
        while heap and not self._is_live(heap[0]):
            heappop(heap)

    def push(self, item: T) -> None:
        heappush(self._heap, (self._keys[item], item))

    def pop(self) -> T:
        """
        Remove and return the live item with the smallest key.

        Raises:
            IndexError: If no live entry remains.
        """
        heap = self._heap
        while heap:
            entry = heappop(heap)
            if self._is_live(entry):
                return entry[1]
        raise IndexError("pop from an empty frontier")

    def peek(self) -> T:
        """
        Return the live item with the smallest key without removing it.

        Raises:
            IndexError: If no live entry remains.
        """
        self._prune()
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][1]
