"""
GameState entity - a read-only snapshot of the game handed to renderers
and input sources.
"""

from typing import List, Tuple

from .constants import CellState, IN_PROGRESS


BOARD_SYMBOLS = {
    CellState.EMPTY: '.',
    CellState.SNAKE_BODY: 'o',
    CellState.APPLE: 'A',
}


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        size: side length N of the square field
        cells: row-major tuple of rows, cells[y][x] is a CellState
        snake_positions: list of (x, y) from head to tail
        heading: current direction of travel
        score: current snake length
        paused: whether the driving loop is idling
        outcome: 'in_progress', 'won' or 'lost'
        speed_ms: current delay between ticks in milliseconds
    """

    def __init__(
        self,
        size: int,
        cells: Tuple[Tuple[CellState, ...], ...],
        snake_positions: List[Tuple[int, int]],
        heading: str,
        score: int,
        paused: bool,
        outcome: str,
        speed_ms: int,
    ):
        self.size = size
        self.cells = cells
        self.snake_positions = snake_positions
        self.heading = heading
        self.score = score
        self.paused = paused
        self.outcome = outcome
        self.speed_ms = speed_ms

    @property
    def in_progress(self) -> bool:
        return self.outcome == IN_PROGRESS

    def cell(self, x: int, y: int) -> CellState:
        return self.cells[y][x]

    def print_board(self) -> str:
        """
        Returns a plain-text representation of the board with:
        . = empty space
        A = apple
        o = snake body
        H = snake head
        Row 0 is printed first (top of the field).
        """
        board = [[BOARD_SYMBOLS[cell] for cell in row] for row in self.cells]
        if self.snake_positions:
            hx, hy = self.snake_positions[0]
            board[hy][hx] = 'H'
        return "\n".join(" ".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState size={self.size}, score={self.score}, "
            f"heading={self.heading}, paused={self.paused}, outcome={self.outcome}>"
        )
