"""
Domain entities for the terminal Snake game engine.

This module contains the core game entities that are independent of
terminal concerns (rendering, keyboard input, configuration files).
"""

from .constants import (
    CellState,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    IN_PROGRESS, WON, LOST,
)
from .grid import Grid
from .snake import Snake
from .game_state import GameState
from .game import SnakeGame
from .input_translator import InputTranslator

__all__ = [
    'CellState',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'IN_PROGRESS', 'WON', 'LOST',
    'Grid',
    'Snake',
    'GameState',
    'SnakeGame',
    'InputTranslator',
]
