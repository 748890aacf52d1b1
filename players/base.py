"""
Base player interface for the game loop.
"""

from typing import Callable, Optional

from domain.game_state import GameState

EventHandler = Callable[[str], None]


class Player:
    """
    Base class/interface for input sources.

    A player feeds input events (MOVE_UP, TOGGLE_PAUSE, QUIT, ...) to the
    game in one of two ways:
      - asynchronously, by calling the handler given to start() from its
        own thread (keyboard input), or
      - synchronously, by returning an event from get_move(), which the
        driving loop polls once per tick (autopilot).
    """

    def start(self, handler: EventHandler) -> None:
        """Begin delivering events to *handler*."""

    def set_handler(self, handler: EventHandler) -> None:
        """Redirect future events to *handler*."""

    def stop(self) -> None:
        """Stop delivering events and release any resources."""

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return an input event for the coming tick, or None for no input.

        Args:
            game_state: Current state of the game
        """
        return None
