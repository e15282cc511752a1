"""
terminal.py — Scoped terminal acquisition.

The game runs on the alternate screen, in cbreak mode, with the cursor
hidden. All three are entered together and released together, whatever
way the block is left.
"""

from contextlib import ExitStack, contextmanager

from .config import MIN_COLS, MIN_ROWS


class TerminalError(Exception):
    """The terminal cannot host the game."""


def check_terminal(term) -> None:
    if not term.is_a_tty:
        raise TerminalError("stdout is not an interactive terminal")
    if term.width < MIN_COLS or term.height < MIN_ROWS:
        raise TerminalError(
            f"terminal is {term.width}x{term.height}, need at least {MIN_COLS}x{MIN_ROWS}"
        )


@contextmanager
def session(term):
    with ExitStack() as stack:
        stack.enter_context(term.fullscreen())
        stack.enter_context(term.cbreak())
        stack.enter_context(term.hidden_cursor())
        yield term
