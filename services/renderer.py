"""
Terminal rendering for Snake.

Frames are built as plain strings (ANSI escapes included) so they can be
tested without a terminal; write_frame() is the only function that
touches an output stream.
"""

import shutil
from typing import Dict, List, Sequence, TextIO

from domain.constants import CellState
from domain.game_state import GameState

ANSI_RESET = "\033[0m"
CLEAR_SCREEN = "\033[H\033[2J"

CONTROL_HINTS = [
    "← - left",
    "→ - right",
    "↑ - up",
    "↓ - down",
    "Ctrl + P - pause",
    "ESC - exit",
]
PAUSE_MESSAGE = "GAME PAUSED (Press Ctrl + P to continue)"


def colorize(text: str, color: str) -> str:
    """Wrap *text* in an ANSI SGR color code such as '32'."""
    if not color:
        return text
    return f"\033[{color}m{text}{ANSI_RESET}"


def terminal_size() -> Sequence[int]:
    """Current (columns, lines) of the terminal, (80, 24) when unknown."""
    return tuple(shutil.get_terminal_size((80, 24)))


def _center(text: str, width: int) -> str:
    return " " * max(0, (width - len(text)) // 2) + text


def _field_lines(state: GameState, glyphs: Dict[str, str]) -> List[str]:
    cell_glyphs = {
        CellState.EMPTY: glyphs["empty"],
        CellState.SNAKE_BODY: colorize(glyphs["snake_body"], glyphs["snake_color"]),
        CellState.APPLE: colorize(glyphs["apple"], glyphs["apple_color"]),
    }

    lines = [glyphs["left_up_corner"] + glyphs["up"] * state.size + glyphs["right_up_corner"]]
    for row in state.cells:
        lines.append(glyphs["left"] + "".join(cell_glyphs[c] for c in row) + glyphs["right"])
    lines.append(glyphs["left_down_corner"] + glyphs["down"] * state.size + glyphs["right_down_corner"])
    return lines


def field_width(size: int, glyphs: Dict[str, str]) -> int:
    """Printed width of the bordered field, in columns."""
    cell_width = max(len(glyphs["empty"]), len(glyphs["snake_body"]), len(glyphs["apple"]))
    return len(glyphs["left"]) + size * cell_width + len(glyphs["right"])


def render_frame(state: GameState, glyphs: Dict[str, str], size: Sequence[int]) -> str:
    """
    Build one full-screen frame for *state*.

    Layout, centred in a terminal of *size* (columns, lines):
      Score line, bordered field, control hints and, while paused,
      the pause message.
    """
    columns, rows = size
    width = field_width(state.size, glyphs)

    lines = [_center(f"Score: {state.score}", width), ""]
    lines.extend(_field_lines(state, glyphs))
    lines.append("")
    lines.extend(_center(hint, width) for hint in CONTROL_HINTS)
    if state.paused:
        lines.append("")
        lines.append(_center(PAUSE_MESSAGE, width))

    x_offset = max(0, (columns - width) // 2)
    y_offset = max(0, (rows - len(lines)) // 2)

    body = "\n".join(" " * x_offset + line if line else line for line in lines)
    return CLEAR_SCREEN + "\n" * y_offset + body + "\n"


def render_title(text: str, size: Sequence[int]) -> str:
    """Clear the screen and centre *text* in it."""
    columns, rows = size
    return CLEAR_SCREEN + "\n" * (rows // 2) + _center(text, columns) + "\n"


def write_frame(output: TextIO, frame: str) -> None:
    output.write(frame)
    output.flush()
