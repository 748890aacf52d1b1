import argparse
import logging
import random
import sys
import threading
import time
from typing import Callable, Optional, Sequence, TextIO

from config import GameConfig, get_log_file, get_log_level, get_seed, load_game_config
from domain.constants import CONFIRM, PAUSE_POLL_INTERVAL, QUIT, WON
from domain.game import SnakeGame
from domain.game_state import GameState
from domain.input_translator import InputTranslator
from players.base import Player
from players.keyboard_player import KeyboardPlayer
from players.random_player import RandomPlayer
from services.renderer import CLEAR_SCREEN, render_frame, render_title, terminal_size, write_frame

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Route log records to *log_file* when given, otherwise to stderr.

    The terminal is the game screen, so anything below WARNING is best
    sent to a file.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)


# -------------------------------
# Game Loop
# -------------------------------

def run_game(
    game: SnakeGame,
    render: Callable[[GameState], None],
    sleep: Callable[[float], None] = time.sleep,
    autopilot: Optional[Player] = None,
) -> str:
    """
    Drive *game* until it is won or lost and return the outcome.

    Each iteration:
      1) If paused, idle for PAUSE_POLL_INTERVAL and check again
      2) Let the autopilot (if any) pick a move
      3) Tick, render, then sleep for the current tick interval

    Input sources running on other threads may change the heading, the
    pause flag or the outcome at any time; changes are picked up at the
    top of the next iteration.
    """
    translator = InputTranslator(game)
    render(game.get_current_state())
    pause_shown = False

    while not game.is_over:
        if game.paused:
            if not pause_shown:
                render(game.get_current_state())
                pause_shown = True
            sleep(PAUSE_POLL_INTERVAL)
            continue
        pause_shown = False

        if autopilot is not None:
            event = autopilot.get_move(game.get_current_state())
            if event is not None:
                translator.handle(event)

        game.tick()
        render(game.get_current_state())
        if game.is_over:
            break

        sleep(game.speed_ms / 1000.0)

    return game.outcome


def wait_for_choice(keyboard: KeyboardPlayer) -> str:
    """
    Block until the player confirms (Enter) or quits (ESC).

    Returns QUIT straight away once the keyboard listener has stopped,
    since nobody could answer.
    """
    chosen = []
    done = threading.Event()

    def on_event(event: str) -> None:
        if event in (CONFIRM, QUIT) and not done.is_set():
            chosen.append(event)
            done.set()

    keyboard.set_handler(on_event)
    while not done.wait(PAUSE_POLL_INTERVAL):
        if not keyboard.running:
            return QUIT
    return chosen[0]


def play_session(
    config: GameConfig,
    keyboard: KeyboardPlayer,
    rng: random.Random,
    output: TextIO = sys.stdout,
    autopilot: Optional[Player] = None,
    sleep: Callable[[float], None] = time.sleep,
    size: Callable[[], Sequence[int]] = terminal_size,
) -> int:
    """
    Play games back to back until the player declines a restart.

    Returns the number of games played.
    """
    glyphs = config.glyphs
    games_played = 0

    def render(state: GameState) -> None:
        write_frame(output, render_frame(state, glyphs, size()))

    while True:
        game = SnakeGame(config.field_size, rng=rng)
        translator = InputTranslator(game)
        keyboard.start(translator.handle)

        outcome = run_game(game, render, sleep=sleep, autopilot=autopilot)
        games_played += 1
        message = "YOU WON" if outcome == WON else "YOU LOST"
        logger.info("Game %d finished: %s with length %d", games_played, outcome, game.snake.length)

        write_frame(output, render_title(
            f"{message}!! Press Enter to play again, ESC to exit", size()
        ))
        if wait_for_choice(keyboard) != CONFIRM:
            return games_played


# -------------------------------
# Main Entry Point
# -------------------------------

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal."
    )
    parser.add_argument("--config", type=str, required=False, default=None,
                        help="Path to the YAML config (default: cfg.yaml in the working "
                             "directory, then next to the program)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for apple placement (default: SNAKE_SEED or random)")
    parser.add_argument("--autopilot", action="store_true",
                        help="Let a random player steer; the keyboard still pauses and exits")

    args = parser.parse_args(argv)

    try:
        configure_logging(get_log_level(), get_log_file())
    except (OSError, ValueError) as e:
        print(f"error configuring logging: {e}", file=sys.stderr)
        return 1

    try:
        config = load_game_config(args.config)
        seed = args.seed if args.seed is not None else get_seed()
    except (FileNotFoundError, ValueError) as e:
        print(f"error loading config: {e}", file=sys.stderr)
        return 1

    rng = random.Random(seed)
    keyboard = KeyboardPlayer()
    autopilot = RandomPlayer(rng) if args.autopilot else None

    try:
        play_session(config, keyboard, rng, autopilot=autopilot)
    except KeyboardInterrupt:
        return 130
    finally:
        keyboard.stop()
        write_frame(sys.stdout, CLEAR_SCREEN)

    return 0


if __name__ == "__main__":
    sys.exit(main())
