"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one position.")
        self.positions = deque(positions)

    @classmethod
    def starting_at(cls, length: int, start_x: int, start_y: int) -> "Snake":
        """
        Build a straight snake of *length* segments lying along row *start_y*.

        The head sits at (start_x, start_y) and the body extends to the left,
        so the tail ends up at (start_x - length + 1, start_y).
        """
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}.")
        return cls([(start_x - i, start_y) for i in range(length)])

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    @property
    def length(self) -> int:
        return len(self.positions)

    def advance_head(self, position: Tuple[int, int]) -> None:
        """Push *position* as the new head. The tail is left in place."""
        self.positions.appendleft(position)

    def drop_tail(self) -> Tuple[int, int]:
        """Detach and return the current tail."""
        if len(self.positions) == 1:
            raise ValueError("Cannot drop the tail of a single-segment snake.")
        return self.positions.pop()

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={self.length}>"
