from __future__ import annotations

from typing import List

from algograph.exceptions import OutOfRangeVertexError


class DisjointSet:
    """
    Union-Find forest over the integers ``0 .. n-1``.

    ``find`` compresses every path it walks; ``union`` links the root of the
    smaller set under the root of the larger one (the smaller ID becomes the
    root on equal sizes). Neither choice affects which elements end up
    connected, only the shape of the trees.
    """

    __slots__ = ("_parent", "_size", "_sets")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Disjoint-set size must be non-negative, got {size}.")
        self._parent: List[int] = list(range(size))
        self._size: List[int] = [1] * size
        self._sets: int = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets."""
        return self._sets

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise OutOfRangeVertexError(x, len(self._parent))

    def find(self, x: int) -> int:
        """Return the representative of x's set."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        # Path compression
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Returns:
            True if two sets were merged, False if x and y were already
            connected.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        size = self._size
        if size[root_x] < size[root_y] or (
            size[root_x] == size[root_y] and root_y < root_x
        ):
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        size[root_x] += size[root_y]
        self._sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
