"""
controller.py — Controller layer.

Responsibilities:
  - Own the refresh loop: render, drain input, tick, sleep.
  - Translate raw keystrokes into model commands.
  - Hold the terminal session for the lifetime of the loop.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

Input notes:
  - Only the first key read in a refresh is applied; anything queued
    behind it is discarded, so one refresh can turn the snake once.
  - Refresh runs at twice the tick rate, which bounds input latency
    by REFRESH rather than TIME_STEP_NS.

The controller is the only layer that reads from the keyboard.
"""

import logging
import os
import sys
import time

import blessed

from .config import REFRESH, LOG_ENV, STATE_WON
from .model import Direction, GameModel
from .terminal import TerminalError, check_terminal, session
from .view import GameView

logger = logging.getLogger(__name__)

_DIRECTION_KEYS = {
    "KEY_LEFT":  Direction.LEFT,
    "KEY_RIGHT": Direction.RIGHT,
    "KEY_UP":    Direction.UP,
    "KEY_DOWN":  Direction.DOWN,
}
_QUIT_KEY = "q"


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, term, model=None, view=None, clock=time.monotonic_ns, sleep=time.sleep):
        self.term  = term
        self.clock = clock
        self.sleep = sleep
        self.model = model if model is not None else GameModel(now=clock())
        self.view  = view if view is not None else GameView(term)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> GameModel:
        """Run the game until it ends or the player quits."""
        with session(self.term):
            while not self.model.is_over:
                self.view.render(self.model)
                self._handle_events()
                self.model.update(self.clock())
                if not self.model.is_over:
                    self.sleep(REFRESH)
        return self.model

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        key = self.term.inkey(timeout=0)
        if not key:
            return
        self._handle_key(key)
        while self.term.inkey(timeout=0):
            pass

    def _handle_key(self, key) -> None:
        if key.is_sequence:
            new_dir = _DIRECTION_KEYS.get(key.name)
            if new_dir is not None:
                self.model.steer(new_dir)
        elif str(key) == _QUIT_KEY:
            self.model.quit()


# ── Process entry ─────────────────────────────────────────────────
def _setup_logging() -> None:
    pkg_logger = logging.getLogger("termsnake")
    path = os.environ.get(LOG_ENV)
    if path:
        path = os.path.abspath(path)
        if not any(getattr(h, "baseFilename", None) == path for h in pkg_logger.handlers):
            handler = logging.FileHandler(path)
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            pkg_logger.addHandler(handler)
        pkg_logger.setLevel(logging.DEBUG)
    elif not any(isinstance(h, logging.NullHandler) for h in pkg_logger.handlers):
        # nothing may reach the game screen
        pkg_logger.addHandler(logging.NullHandler())


def summary(model: GameModel) -> str:
    if model.state == STATE_WON:
        return f"You won! Score: {model.score}"
    return f"Game over! Score: {model.score}"


def run_app(term=None) -> int:
    """Set up the terminal, play one game, and return the exit code."""
    _setup_logging()
    term = term if term is not None else blessed.Terminal()
    try:
        check_terminal(term)
    except TerminalError as exc:
        logger.warning("cannot start: %s", exc)
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1

    controller = GameController(term)
    try:
        controller.run()
    except OSError as exc:
        logger.exception("terminal I/O failed")
        print(f"termsnake: terminal I/O failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("interrupted: score=%d", controller.model.score)
        print(summary(controller.model))
        return 130

    print(summary(controller.model))
    return 0
