"""
Shared helpers for arranging game positions in tests.
"""

from typing import List, Optional, Tuple

from domain.constants import CellState
from domain.game import SnakeGame
from domain.snake import Snake


def install(
    game: SnakeGame,
    positions: List[Tuple[int, int]],
    apple: Optional[Tuple[int, int]] = None,
    heading: Optional[str] = None,
) -> None:
    """
    Replace the board of *game* with a snake at *positions* (head first)
    and an optional apple, keeping grid and snake consistent.
    """
    size = game.grid.size
    for y in range(size):
        for x in range(size):
            game.grid.set(x, y, CellState.EMPTY)

    game.snake = Snake(positions)
    for x, y in positions:
        game.grid.set(x, y, CellState.SNAKE_BODY)

    game.apple = apple
    if apple is not None:
        game.grid.set(apple[0], apple[1], CellState.APPLE)

    if heading is not None:
        game.heading = heading
        game.request_heading(heading)


def move_apple(game: SnakeGame, x: int, y: int) -> None:
    """Move the current apple to (x, y)."""
    if game.apple is not None:
        game.grid.set(game.apple[0], game.apple[1], CellState.EMPTY)
    game.grid.set(x, y, CellState.APPLE)
    game.apple = (x, y)


def serpentine(size: int) -> List[Tuple[int, int]]:
    """Every cell of a size x size board as one boustrophedon path."""
    path = []
    for y in range(size):
        xs = range(size) if y % 2 == 0 else range(size - 1, -1, -1)
        path.extend((x, y) for x in xs)
    return path
