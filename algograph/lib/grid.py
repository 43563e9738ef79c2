"""Grid graphs for A* search.

A grid is a dense boolean matrix of obstacle flags. Its graph is implicit:
every walkable cell is a vertex, connected to its walkable up/down/left/right
neighbors with unit-cost edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

import numpy as np

# Up, Down, Left, Right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, order=True)
class GridCell:
    """
    A (row, col) position on a grid.

    Identity is by value: two cells with the same coordinates are equal and
    hash alike. Ordering is row-major, which gives searches a stable
    tie-break.
    """

    row: int
    col: int

    @classmethod
    def of(cls, value: CellLike) -> GridCell:
        """Coerce a GridCell or a (row, col) pair to a GridCell."""
        if isinstance(value, GridCell):
            return value
        row, col = value
        return cls(int(row), int(col))

    def manhattan(self, other: GridCell) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.col


CellLike = Union[GridCell, Tuple[int, int]]


class Grid:
    """Rectangular grid with a walkable/obstacle flag per cell."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}.")
        self._blocked = np.zeros((rows, cols), dtype=bool)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """
        Build a grid from rows of flags, 0 for walkable and non-zero for obstacle.

        Raises:
            ValueError: If rows is empty or ragged.
        """
        if not rows or not rows[0]:
            raise ValueError("Grid must have at least one row and one column.")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All grid rows must have the same length.")
        grid = cls(len(rows), width)
        grid._blocked[:, :] = np.asarray(rows) != 0
        return grid

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, obstacles={self.obstacle_count})"

    @property
    def rows(self) -> int:
        return self._blocked.shape[0]

    @property
    def cols(self) -> int:
        return self._blocked.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def obstacle_count(self) -> int:
        return int(self._blocked.sum())

    def in_bounds(self, cell: CellLike) -> bool:
        row, col = GridCell.of(cell)
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_walkable(self, cell: CellLike) -> bool:
        """Return True if the cell is inside the grid and not an obstacle."""
        cell = GridCell.of(cell)
        return self.in_bounds(cell) and not self._blocked[cell.row, cell.col]

    def set_obstacle(self, cell: CellLike, blocked: bool = True) -> None:
        """
        Mark a cell as an obstacle (or clear it with blocked=False).

        Raises:
            IndexError: If the cell is outside the grid.
        """
        cell = GridCell.of(cell)
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {tuple(cell)} is outside a {self.rows}x{self.cols} grid.")
        self._blocked[cell.row, cell.col] = blocked

    def neighbors(self, cell: CellLike) -> Iterator[GridCell]:
        """Yield walkable cells adjacent to ``cell``, in up/down/left/right order."""
        cell = GridCell.of(cell)
        for d_row, d_col in DIRECTIONS:
            candidate = GridCell(cell.row + d_row, cell.col + d_col)
            if self.is_walkable(candidate):
                yield candidate

    def as_array(self) -> np.ndarray:
        """Return a read-only copy of the obstacle mask."""
        data = self._blocked.copy()
        data.flags.writeable = False
        return data
