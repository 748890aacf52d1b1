"""
Game constants for terminal Snake.
"""

from enum import IntEnum


class CellState(IntEnum):
    EMPTY = 0
    SNAKE_BODY = 1
    APPLE = 2


# Headings
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# (dx, dy) per heading; y grows downwards, row 0 is the top of the field
DIRECTION_DELTA = {
    UP:    (0, -1),
    DOWN:  (0,  1),
    LEFT:  (-1, 0),
    RIGHT: (1,  0),
}

# Outcomes
IN_PROGRESS = "in_progress"
WON = "won"
LOST = "lost"

# Input events
MOVE_UP = "MOVE_UP"
MOVE_DOWN = "MOVE_DOWN"
MOVE_LEFT = "MOVE_LEFT"
MOVE_RIGHT = "MOVE_RIGHT"
TOGGLE_PAUSE = "TOGGLE_PAUSE"
QUIT = "QUIT"
CONFIRM = "CONFIRM"

MOVE_EVENTS = {
    MOVE_UP: UP,
    MOVE_DOWN: DOWN,
    MOVE_LEFT: LEFT,
    MOVE_RIGHT: RIGHT,
}

# Game settings
INITIAL_SNAKE_LENGTH = 3
GAME_SPEED_COEFFICIENT = 868.75
MAX_SNAKE_SPEED = 150.0  # milliseconds
PAUSE_POLL_INTERVAL = 0.1  # seconds
