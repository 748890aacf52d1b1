"""
InputTranslator - turns input events into engine requests.
"""

import logging

from .constants import CONFIRM, MOVE_EVENTS, QUIT, TOGGLE_PAUSE
from .game import SnakeGame

logger = logging.getLogger(__name__)


class InputTranslator:
    """
    Routes MOVE_*, TOGGLE_PAUSE and QUIT events to a SnakeGame.

    Safe to call from an input thread while the driving loop ticks; the
    engine guards every field this class touches.
    """

    def __init__(self, game: SnakeGame):
        self.game = game

    def handle(self, event: str) -> bool:
        """
        Apply *event* to the game.

        Returns:
            True if the event changed the game, False if it was ignored
            (a reversal, an event that means nothing during play, or any
            event once the game is over).
        """
        if event in MOVE_EVENTS:
            if self.game.is_over:
                return False
            accepted = self.game.request_heading(MOVE_EVENTS[event])
            if not accepted:
                logger.debug("Ignored %s: reverse of %s", event, self.game.heading)
            return accepted

        if event == TOGGLE_PAUSE:
            if self.game.is_over:
                return False
            paused = self.game.toggle_pause()
            logger.debug("Pause %s", "on" if paused else "off")
            return True

        if event == QUIT:
            if self.game.is_over:
                return False
            self.game.quit()
            return True

        if event != CONFIRM:
            logger.warning("Unknown input event %r", event)
        return False
