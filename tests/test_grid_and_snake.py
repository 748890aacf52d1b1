"""
Tests for the Grid and Snake domain entities.
"""

import pytest
import random
import sys
import os
from collections import deque

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import CellState
from domain.grid import Grid
from domain.snake import Snake


class TestGrid:
    """Tests for the Grid class."""

    def test_new_grid_is_empty(self):
        """A new grid has size x size empty cells."""
        grid = Grid(5)
        assert grid.size == 5
        assert grid.area == 25
        assert grid.count(CellState.EMPTY) == 25

    def test_size_below_one_raises(self):
        """Grid rejects a size below 1."""
        with pytest.raises(ValueError):
            Grid(0)

    def test_set_and_get(self):
        """set() overwrites a cell and get() reads it back."""
        grid = Grid(5)
        grid.set(1, 3, CellState.SNAKE_BODY)
        assert grid.get(1, 3) == CellState.SNAKE_BODY
        # (x, y) is not the same cell as (y, x)
        assert grid.get(3, 1) == CellState.EMPTY

    def test_set_overwrites(self):
        """A second set() on the same cell replaces the first."""
        grid = Grid(5)
        grid.set(2, 2, CellState.APPLE)
        grid.set(2, 2, CellState.EMPTY)
        assert grid.get(2, 2) == CellState.EMPTY

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 5)])
    def test_out_of_bounds_access_raises(self, x, y):
        """get() and set() raise IndexError outside the field."""
        grid = Grid(5)
        assert grid.in_bounds(x, y) is False
        with pytest.raises(IndexError):
            grid.get(x, y)
        with pytest.raises(IndexError):
            grid.set(x, y, CellState.APPLE)

    def test_place_apple_uses_empty_cell(self):
        """place_apple_randomly() never lands on an occupied cell."""
        grid = Grid(5)
        for x in range(5):
            for y in range(5):
                if (x, y) != (3, 4):
                    grid.set(x, y, CellState.SNAKE_BODY)

        position = grid.place_apple_randomly(random.Random(0))

        assert position == (3, 4)
        assert grid.get(3, 4) == CellState.APPLE
        assert grid.count(CellState.APPLE) == 1

    def test_place_apple_mutates_exactly_one_cell(self):
        """Placing an apple changes one cell only."""
        grid = Grid(6)
        before = grid.rows()
        x, y = grid.place_apple_randomly(random.Random(3))
        after = grid.rows()

        changed = [
            (cx, cy) for cy in range(6) for cx in range(6)
            if before[cy][cx] != after[cy][cx]
        ]
        assert changed == [(x, y)]

    def test_place_apple_on_full_grid_raises(self):
        """place_apple_randomly() refuses to loop forever on a full grid."""
        grid = Grid(2)
        for x in range(2):
            for y in range(2):
                grid.set(x, y, CellState.SNAKE_BODY)

        with pytest.raises(ValueError):
            grid.place_apple_randomly(random.Random(0))

    def test_rows_is_an_immutable_copy(self):
        """rows() returns tuples that do not follow later changes."""
        grid = Grid(3)
        rows = grid.rows()
        grid.set(0, 0, CellState.APPLE)

        assert isinstance(rows, tuple)
        assert rows[0][0] == CellState.EMPTY
        assert grid.rows()[0][0] == CellState.APPLE


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_multiple_positions(self):
        """Snake initializes with multiple positions (body segments)."""
        positions = [(5, 5), (4, 5), (3, 5)]
        snake = Snake(positions)
        assert list(snake.positions) == positions
        assert snake.length == 3

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for O(1) head and tail updates."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_empty_snake_raises(self):
        """A snake needs at least one position."""
        with pytest.raises(ValueError):
            Snake([])

    def test_starting_at_extends_left(self):
        """starting_at() lays the body out to the left of the head."""
        snake = Snake.starting_at(3, 5, 5)
        assert list(snake) == [(5, 5), (4, 5), (3, 5)]
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)

    def test_starting_at_rejects_zero_length(self):
        """starting_at() needs a positive length."""
        with pytest.raises(ValueError):
            Snake.starting_at(0, 5, 5)

    def test_advance_head_keeps_tail(self):
        """advance_head() grows the snake at the front only."""
        snake = Snake.starting_at(3, 5, 5)
        snake.advance_head((6, 5))

        assert snake.head == (6, 5)
        assert snake.tail == (3, 5)
        assert snake.length == 4

    def test_drop_tail_returns_old_tail(self):
        """drop_tail() removes the last segment and hands it back."""
        snake = Snake.starting_at(3, 5, 5)
        snake.advance_head((6, 5))

        dropped = snake.drop_tail()

        assert dropped == (3, 5)
        assert snake.tail == (4, 5)
        assert len(snake) == 3

    def test_drop_tail_of_single_segment_raises(self):
        """A one-segment snake has no tail to drop."""
        snake = Snake([(1, 1)])
        with pytest.raises(ValueError):
            snake.drop_tail()
