"""
Grid entity - the authoritative occupancy map of the field.
"""

import random
from typing import List, Tuple

from .constants import CellState


class Grid:
    """
    A fixed-size square matrix of cell states.

    Cells are addressed as (x, y) with x the column and y the row;
    row 0 is the top of the field.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}.")
        self.size = size
        self._cells: List[List[CellState]] = [
            [CellState.EMPTY for _ in range(size)] for _ in range(size)
        ]

    @property
    def area(self) -> int:
        return self.size * self.size

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell {(x, y)} is outside a {self.size}x{self.size} grid.")

    def get(self, x: int, y: int) -> CellState:
        self._check_bounds(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, state: CellState) -> None:
        self._check_bounds(x, y)
        self._cells[y][x] = state

    def count(self, state: CellState) -> int:
        """Return how many cells currently hold *state*."""
        return sum(row.count(state) for row in self._cells)

    def place_apple_randomly(self, rng: random.Random) -> Tuple[int, int]:
        """
        Put an apple on a uniformly random empty cell and return its (x, y).

        Rejection-samples coordinates until an empty one comes up, so it
        slows down as the board fills; the engine never calls it on a full
        board.

        Raises:
            ValueError: If there is no empty cell left.
        """
        if self.count(CellState.EMPTY) == 0:
            raise ValueError("Cannot place an apple on a full grid.")

        while True:
            x = rng.randrange(self.size)
            y = rng.randrange(self.size)
            if self._cells[y][x] == CellState.EMPTY:
                self._cells[y][x] = CellState.APPLE
                return (x, y)

    def rows(self) -> Tuple[Tuple[CellState, ...], ...]:
        """Return an immutable row-major copy of the cells."""
        return tuple(tuple(row) for row in self._cells)

    def __repr__(self):
        return f"<Grid size={self.size}>"
