"""
view.py — View layer.

Draws a GameModel into a text stream using blessed terminal sequences.
Every frame is rebuilt from scratch: clear, HUD, snake, food, wall.
The wall goes last so it overpaints anything stale at the border.

Public API:
    GameView(term, out)  — bind to a blessed Terminal and an output stream
    view.render(model)   — draw the current frame
"""

from .config import (
    BLOCK, TITLE, TITLE_POS, SCORE_POS,
    FOOD_COL, SNAKE_COL, WALL_COL, TITLE_COL, SCORE_COL,
)
from .model import Cell, GameModel


def render_cell(term, out: list, cell: Cell, color: str) -> None:
    """Queue one block glyph per terminal position covered by the cell."""
    paint = getattr(term, color)
    w, h = cell.size
    for x in range(cell.x, cell.x + w):
        for y in range(cell.y, cell.y + h):
            out.append(term.move_xy(x, y) + paint(BLOCK))


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    def __init__(self, term, out=None):
        self.term = term
        self.out = out if out is not None else term.stream

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel) -> None:
        frame: list[str] = [self.term.home + self.term.clear]
        self._draw_hud(frame, model)
        for cell in model.snake:
            render_cell(self.term, frame, cell, SNAKE_COL)
        if model.food is not None:
            render_cell(self.term, frame, model.food, FOOD_COL)
        for cell in model.wall:
            render_cell(self.term, frame, cell, WALL_COL)

        self.out.write("".join(frame))
        self.out.flush()

    # ── HUD ──────────────────────────────────────────────────────
    def _draw_hud(self, frame: list, model: GameModel) -> None:
        term = self.term
        frame.append(term.move_xy(*TITLE_POS) + getattr(term, TITLE_COL)(TITLE))
        frame.append(term.move_xy(*SCORE_POS) + getattr(term, SCORE_COL)(f"Score: {model.score}"))
