"""
Random player implementation - an autopilot that picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import (
    CellState, DIRECTION_DELTA, MOVE_EVENTS, OPPOSITE,
)
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a heading that avoids walls and its own body.

    Any body cell counts as blocked, including the tail, since the engine
    evaluates collisions before the tail moves.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Optional[str]:
        head_x, head_y = game_state.snake_positions[0]

        safe_moves: List[str] = []
        for event, heading in MOVE_EVENTS.items():
            if heading == OPPOSITE[game_state.heading]:
                continue

            dx, dy = DIRECTION_DELTA[heading]
            new_x, new_y = head_x + dx, head_y + dy

            # Check wall collisions
            if not (0 <= new_x < game_state.size and 0 <= new_y < game_state.size):
                continue

            # Check self collisions
            if game_state.cell(new_x, new_y) == CellState.SNAKE_BODY:
                continue

            safe_moves.append(event)

        # No safe move: keep going and lose on the next tick
        if not safe_moves:
            return None

        return self.rng.choice(sorted(safe_moves))
