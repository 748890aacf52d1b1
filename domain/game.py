"""
SnakeGame - the movement, collision and speed state machine.

No I/O or rendering happens here. The driving loop calls tick() once per
interval; input sources only touch the requested heading, the pause flag
and (on quit) the outcome, all of which are guarded by one lock.
"""

import logging
import random
import threading
from typing import Optional

from .constants import (
    CellState,
    DIRECTION_DELTA,
    GAME_SPEED_COEFFICIENT,
    INITIAL_SNAKE_LENGTH,
    IN_PROGRESS,
    LOST,
    MAX_SNAKE_SPEED,
    OPPOSITE,
    RIGHT,
    VALID_MOVES,
    WON,
)
from .game_state import GameState
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Grid (field_size x field_size occupancy map)
      - Snake
      - Heading (current and requested)
      - Pause flag and outcome
      - Tick interval (speed)
    """

    def __init__(
        self,
        field_size: int,
        rng: Optional[random.Random] = None,
        speed_coefficient: float = GAME_SPEED_COEFFICIENT,
    ):
        start = field_size // 2
        if start - (INITIAL_SNAKE_LENGTH - 1) < 0:
            raise ValueError(
                f"Field size {field_size} is too small for a snake of length "
                f"{INITIAL_SNAKE_LENGTH}."
            )

        self.rng = rng if rng is not None else random.Random()
        self.speed_coefficient = speed_coefficient
        self.grid = Grid(field_size)
        self.snake = Snake.starting_at(INITIAL_SNAKE_LENGTH, start, start)
        self.heading = RIGHT
        self.speed_ms = 0
        self.quit_requested = False

        self._lock = threading.Lock()
        self._requested_heading = RIGHT
        self._paused = False
        self._outcome = IN_PROGRESS

        for x, y in self.snake:
            self.grid.set(x, y, CellState.SNAKE_BODY)
        self.apple = self.grid.place_apple_randomly(self.rng)
        self.adjust_speed()

        logger.info(
            "New game: field %dx%d, snake at %s, apple at %s, tick %d ms",
            field_size, field_size, self.snake.head, self.apple, self.speed_ms,
        )

    # ------------------------------------------------------------------
    # Shared state (written by input sources, read by the driving loop)
    # ------------------------------------------------------------------

    @property
    def outcome(self) -> str:
        with self._lock:
            return self._outcome

    @property
    def paused(self) -> bool:
        with self._lock:
            return self._paused

    @property
    def requested_heading(self) -> str:
        with self._lock:
            return self._requested_heading

    @property
    def is_over(self) -> bool:
        return self.outcome != IN_PROGRESS

    def request_heading(self, heading: str) -> bool:
        """
        Ask for a new heading, applied at the start of the next tick.

        The request is rejected when it is the reverse of the heading the
        snake is currently moving in. Every request made between two ticks
        is checked against that same current heading.
        """
        if heading not in VALID_MOVES:
            raise ValueError(f"Unknown heading {heading!r}.")
        with self._lock:
            if heading == OPPOSITE[self.heading]:
                return False
            self._requested_heading = heading
            return True

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value."""
        with self._lock:
            self._paused = not self._paused
            return self._paused

    def quit(self) -> None:
        """End the game immediately. A quit is reported as a loss."""
        with self._lock:
            if self._outcome != IN_PROGRESS:
                return
            self._outcome = LOST
            self.quit_requested = True
        logger.info("Player quit with length %d", self.snake.length)

    def _finish(self, outcome: str, reason: str) -> str:
        with self._lock:
            if self._outcome == IN_PROGRESS:
                self._outcome = outcome
            outcome = self._outcome
        logger.info("Game over (%s): %s, length %d", outcome, reason, self.snake.length)
        return outcome

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def adjust_speed(self) -> int:
        """
        Recompute the tick interval from the current snake length.

        The interval falls linearly from min_speed (empty board) towards
        MAX_SNAKE_SPEED (full board), where min_speed shrinks with the
        field area so bigger boards start faster.
        """
        field_area = self.grid.area
        min_speed = -(3.0 / 16.0) * field_area + self.speed_coefficient
        normalized_length = self.snake.length / field_area

        speed = min_speed - (min_speed - MAX_SNAKE_SPEED) * normalized_length
        self.speed_ms = int(speed)
        return self.speed_ms

    def tick(self) -> str:
        """
        Advance the game by one step and return the outcome.

        1) Apply the requested heading
        2) Won if the snake already fills the board
        3) Lost if the next cell is outside the field or holds the body
           (the tail cell counts, it has not been vacated yet)
        4) Move, growing and respawning the apple when one is eaten
        """
        with self._lock:
            if self._outcome != IN_PROGRESS:
                return self._outcome
            self.heading = self._requested_heading

        if self.snake.length == self.grid.area:
            return self._finish(WON, "board filled")

        hx, hy = self.snake.head
        dx, dy = DIRECTION_DELTA[self.heading]
        new_head = (hx + dx, hy + dy)

        if not self.grid.in_bounds(*new_head):
            return self._finish(LOST, f"hit the wall at {new_head}")
        if self.grid.get(*new_head) == CellState.SNAKE_BODY:
            return self._finish(LOST, f"ran into itself at {new_head}")

        ate_apple = self.grid.get(*new_head) == CellState.APPLE
        self.snake.advance_head(new_head)
        self.grid.set(*new_head, CellState.SNAKE_BODY)

        if ate_apple:
            self.adjust_speed()
            logger.debug(
                "Apple eaten at %s, length %d, tick %d ms",
                new_head, self.snake.length, self.speed_ms,
            )
            # A full board has nowhere left to put an apple; the next tick wins.
            if self.snake.length < self.grid.area:
                self.apple = self.grid.place_apple_randomly(self.rng)
            else:
                self.apple = None
        else:
            tx, ty = self.snake.drop_tail()
            self.grid.set(tx, ty, CellState.EMPTY)

        return self.outcome

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        with self._lock:
            paused = self._paused
            outcome = self._outcome

        return GameState(
            size=self.grid.size,
            cells=self.grid.rows(),
            snake_positions=list(self.snake.positions),
            heading=self.heading,
            score=self.snake.length,
            paused=paused,
            outcome=outcome,
            speed_ms=self.speed_ms,
        )

    def __repr__(self):
        return (
            f"<SnakeGame size={self.grid.size}, length={self.snake.length}, "
            f"heading={self.heading}, outcome={self.outcome}>"
        )
