"""
Keyboard player - reads raw key presses from the terminal on a
background thread.

POSIX only: the terminal is switched to cbreak mode with termios/tty
while the listener runs and restored when it stops.
"""

import codecs
import logging
import os
import select
import sys
import threading
from typing import List, Optional, TextIO, Tuple

from domain.constants import (
    CONFIRM, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, MOVE_UP, QUIT, TOGGLE_PAUSE,
)
from .base import EventHandler, Player

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.1  # seconds between checks of the stop flag
ESCAPE_TIMEOUT = 0.05  # how long a trailing ESC waits for the rest of a sequence

ESC = "\x1b"
CTRL_P = "\x10"

# Final byte of the arrow-key escape sequences (ESC [ X or ESC O X)
ARROW_KEYS = {
    "A": MOVE_UP,
    "B": MOVE_DOWN,
    "C": MOVE_RIGHT,
    "D": MOVE_LEFT,
}


def _split_keys(data: str) -> Tuple[List[str], str]:
    """
    Decode *data* up to an unfinished escape sequence.

    Returns the events found and the unconsumed tail ('', ESC or ESC plus
    '[' / 'O'), which may still turn into an arrow key.
    """
    events = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == ESC:
            if i + 1 == len(data):
                return events, data[i:]
            if data[i + 1] in "[O":
                if i + 2 == len(data):
                    return events, data[i:]
                event = ARROW_KEYS.get(data[i + 2])
                if event:
                    events.append(event)
                i += 3
                continue
            events.append(QUIT)
        elif ch == CTRL_P:
            events.append(TOGGLE_PAUSE)
        elif ch in "\r\n":
            events.append(CONFIRM)
        i += 1
    return events, ""


class KeyDecoder:
    """
    Incremental key decoder for input that arrives in arbitrary chunks.

    An escape sequence split across reads is held back until the rest
    arrives; flush() settles whatever is still pending, turning a lone
    ESC into QUIT and dropping a half sequence.
    """

    def __init__(self):
        self.pending = ""

    def feed(self, data: str) -> List[str]:
        events, self.pending = _split_keys(self.pending + data)
        return events

    def flush(self) -> List[str]:
        pending, self.pending = self.pending, ""
        return [QUIT] if pending == ESC else []


def decode_keys(data: str) -> List[str]:
    """
    Translate a complete chunk of raw terminal input into input events.

    Arrow keys arrive as 'ESC [ A'..'ESC [ D' (or 'ESC O A' in application
    cursor mode); a lone ESC means quit. Unmapped keys are dropped.
    """
    decoder = KeyDecoder()
    return decoder.feed(data) + decoder.flush()


class KeyboardPlayer(Player):
    """
    Delivers key presses from *stream* (stdin by default) to a handler.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._handler: Optional[EventHandler] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._saved_attrs = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def set_handler(self, handler: EventHandler) -> None:
        self._handler = handler

    def start(self, handler: EventHandler) -> None:
        self._handler = handler
        if self.running:
            return

        if not self.stream.isatty():
            logger.warning("Input is not a terminal; keyboard controls are disabled.")
            return

        import termios
        import tty

        fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)

        self._stop.clear()
        self._thread = threading.Thread(
            target=self._listen, args=(fd,), name="keyboard-listener", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            self._thread = None

        if self._saved_attrs is not None:
            import termios

            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def _dispatch(self, events: List[str]) -> None:
        for event in events:
            handler = self._handler
            if handler is not None:
                handler(event)

    def _listen(self, fd: int) -> None:
        keys = KeyDecoder()
        text = codecs.getincrementaldecoder("utf-8")(errors="ignore")
        try:
            while not self._stop.is_set():
                timeout = ESCAPE_TIMEOUT if keys.pending else POLL_INTERVAL
                ready, _, _ = select.select([fd], [], [], timeout)
                if not ready:
                    self._dispatch(keys.flush())
                    continue

                data = os.read(fd, 32)
                if not data:
                    self._dispatch(keys.flush())
                    logger.info("Input stream closed")
                    return

                self._dispatch(keys.feed(text.decode(data)))
        except (OSError, ValueError):
            logger.exception("Keyboard listener stopped")
