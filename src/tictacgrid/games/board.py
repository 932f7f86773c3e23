"""
Board - square grid of cell marks.

A dumb container: stores and exposes marks, knows nothing about turns
or winning. Uses an int8 board indexed [y, x] (row-major, like every
other numpy board in the package), while the public API takes (x, y)
with x = column and y = row.
"""

from __future__ import annotations

import operator
from typing import List, Tuple

import numpy as np

from tictacgrid.core.errors import InvalidDimension, OutOfBounds
from tictacgrid.core.types import (
    CELL_STRINGS,
    MAX_CELL_COUNT,
    MIN_BOARD_SIZE,
    Mark,
)


def validate_size(n: object) -> int:
    """
    Return n as an int if it is a usable board side length.

    Raises InvalidDimension when n is not an integer, is below
    MIN_BOARD_SIZE, or when n*n would overflow a 32-bit cell counter.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidDimension(n, f"Board size must be an integer, got {n!r}")
    n = int(n)
    if n < MIN_BOARD_SIZE:
        raise InvalidDimension(n, f"Board size must be at least {MIN_BOARD_SIZE}, got {n}")
    if n * n > MAX_CELL_COUNT:
        raise InvalidDimension(n, f"Board size {n} overflows the cell counter ({n * n} > {MAX_CELL_COUNT})")
    return n


class Board:
    """N x N grid of marks. Dimensions are fixed at construction."""

    __slots__ = ('_size', '_cells')

    def __init__(self, size: int):
        self._size = validate_size(size)
        self._cells = np.zeros((self._size, self._size), dtype=np.int8)

    @classmethod
    def create(cls, size: int) -> "Board":
        return cls(size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def cell_count(self) -> int:
        return self._size * self._size

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the grid, indexed [y, x]."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) is inside the board."""
        return 0 <= x < self._size and 0 <= y < self._size

    def _check(self, x: int, y: int) -> Tuple[int, int]:
        x, y = operator.index(x), operator.index(y)
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self._size)
        return x, y

    def get(self, x: int, y: int) -> Mark:
        x, y = self._check(x, y)
        return Mark(int(self._cells[y, x]))

    def set(self, x: int, y: int, mark: Mark) -> None:
        """Overwrite a cell unconditionally. Occupancy is the engine's concern."""
        x, y = self._check(x, y)
        self._cells[y, x] = int(Mark(mark))

    def clear(self) -> None:
        self._cells.fill(Mark.EMPTY)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Empty positions as (x, y), in row-major order."""
        return [(int(x), int(y)) for y, x in np.argwhere(self._cells == Mark.EMPTY)]

    def is_full(self) -> bool:
        return not np.any(self._cells == Mark.EMPTY)

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b._size = self._size
        b._cells = self._cells.copy()
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._cells, other._cells)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Board(size={self._size})"

    def to_string(self) -> str:
        """Boxed text rendering, one row per line, top row first."""
        n = self._size
        width = 3
        top = "╭" + "┬".join("─" * width for _ in range(n)) + "╮"
        sep = "├" + "┼".join("─" * width for _ in range(n)) + "┤"
        bottom = "╰" + "┴".join("─" * width for _ in range(n)) + "╯"

        lines = [top]
        for y in range(n):
            row = "│" + "│".join(
                CELL_STRINGS[Mark(int(v))].center(width) for v in self._cells[y]
            ) + "│"
            lines.append(row)
            if y < n - 1:
                lines.append(sep)
        lines.append(bottom)
        return "\n".join(lines)
