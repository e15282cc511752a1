"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction   — immutable (dx, dy) value object
    Cell        — one cell-aligned rectangle on the character grid
    Snake       — body, heading
    Wall        — the immutable playfield border
    GameModel   — top-level model; owns wall, snake, food, score, state
"""

import logging
import random
from collections import deque

from .config import (
    CELL_W, CELL_H, GROUND_W, GROUND_H,
    INTERIOR_X, INTERIOR_Y,
    START_POS, START_LEN, TIME_STEP_NS,
    STATE_PLAYING, STATE_OVER, STATE_WON,
)

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int, name: str = ""):
        self.x = x
        self.y = y
        self.name = name

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def reverse(self) -> "Direction":
        for d in ALL_DIRS:
            if d.is_opposite(self):
                return d
        raise ValueError(f"no reverse for {self!r}")

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name}" if self.name else f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0, "LEFT")
Direction.RIGHT = Direction( 1,  0, "RIGHT")
Direction.UP    = Direction( 0, -1, "UP")
Direction.DOWN  = Direction( 0,  1, "DOWN")
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


# ───────────────────────────── Cell ──────────────────────────────
class Cell:
    """
    A CELL_W x CELL_H rectangle anchored at (x, y).
    Size is uniform, so two cells are equal iff their anchors are.
    """
    __slots__ = ("x", "y")

    size = (CELL_W, CELL_H)

    def __init__(self, x: int, y: int):
        if x < 0 or y < 0:
            raise ValueError(f"cell anchor out of grid: ({x}, {y})")
        self.x = x
        self.y = y

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def shift(self, d: Direction, steps: int = 1) -> "Cell":
        return Cell(self.x + d.x * steps * CELL_W, self.y + d.y * steps * CELL_H)

    def is_aligned(self) -> bool:
        return self.x % CELL_W == 0 and self.y % CELL_H == 0

    def __eq__(self, other):
        return isinstance(other, Cell) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Cell({self.x}, {self.y})"


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Pure game data for the snake: body cells (head first) and heading.
    No rendering. No input handling.
    """

    def __init__(self, head_pos: tuple[int, int], heading: Direction, length: int = START_LEN):
        if length < 1:
            raise ValueError("snake length must be at least 1")
        head = Cell(*head_pos)
        behind = heading.reverse()
        self.body: deque[Cell] = deque(head.shift(behind, i) for i in range(length))
        self.dir: Direction = heading

    # ── Accessors ────────────────────────────────────────────────
    def head(self) -> Cell:
        return self.body[0]

    def next_head(self) -> Cell:
        return self.head().shift(self.dir, 1)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def turn(self, new_dir: Direction) -> bool:
        """Change heading unless it would reverse the snake into its neck."""
        if new_dir.is_opposite(self.dir):
            return False
        self.dir = new_dir
        return True

    def grow(self) -> None:
        """Prepend a new head; the tail stays put."""
        self.body.appendleft(self.next_head())

    def step(self) -> None:
        """Advance one cell."""
        self.body.appendleft(self.next_head())
        self.body.pop()

    # ── Queries ──────────────────────────────────────────────────
    def self_bites(self) -> bool:
        head = self.head()
        return any(c == head for c in list(self.body)[1:])

    def eats(self, food: Cell) -> bool:
        return self.head() == food

    def overlaps(self, cell: Cell) -> bool:
        return cell in self.body

    def hits(self, wall: "Wall") -> bool:
        return wall.hits(self.head())

    # Prospective checks, made before the body moves
    def would_hit(self, wall: "Wall") -> bool:
        return wall.hits(self.next_head())

    def would_bite(self) -> bool:
        # the tail has not moved yet, so it still counts
        return self.overlaps(self.next_head())


# ───────────────────────────── Wall ──────────────────────────────
class Wall:
    """The four border segments around the playfield; immutable once built."""

    def __init__(self):
        xs = range(CELL_W, GROUND_W - CELL_W + 1, CELL_W)
        ys = range(2 * CELL_H, GROUND_H, CELL_H)
        top    = [(x, CELL_H) for x in xs]
        left   = [(CELL_W, y) for y in ys]
        right  = [(GROUND_W - CELL_W, y) for y in ys]
        bottom = [(x, GROUND_H) for x in xs]
        self.cells: frozenset[Cell] = frozenset(
            Cell(x, y) for x, y in top + left + right + bottom
        )

    def hits(self, cell: Cell) -> bool:
        return cell in self.cells

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


def interior_cells() -> list[Cell]:
    """Every cell-aligned anchor strictly inside the walls."""
    return [Cell(x, y) for x in range(*INTERIOR_X) for y in range(*INTERIOR_Y)]


INTERIOR_SIZE = len(range(*INTERIOR_X)) * len(range(*INTERIOR_Y))


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls update() once per refresh; step() is one tick.
    """

    def __init__(self, rng=None, now: int = 0):
        self.rng = rng if rng is not None else random.Random()
        self.wall: Wall = Wall()
        self.snake: Snake = Snake(START_POS, Direction.RIGHT, START_LEN)
        self.food: Cell = None
        self.score: int = 0
        self.ticks: int = 0
        self.time_step: int = TIME_STEP_NS
        self.last_tick: int = now
        self.state: str = STATE_PLAYING
        self.reason: str = None
        self.place_food()
        logger.info("game started: head=%r food=%r", self.snake.head(), self.food)

    # ── Public API ───────────────────────────────────────────────
    @property
    def is_over(self) -> bool:
        return self.state != STATE_PLAYING

    def steer(self, new_dir: Direction) -> bool:
        if self.is_over:
            return False
        accepted = self.snake.turn(new_dir)
        if accepted:
            logger.debug("heading now %r", new_dir)
        return accepted

    def quit(self) -> None:
        if not self.is_over:
            self._finish(STATE_OVER, "quit")

    def update(self, now: int) -> bool:
        """Run one tick if a full time step has elapsed since the last one."""
        if now - self.last_tick < self.time_step:
            return False
        self.step()
        self.last_tick = now
        return True

    def step(self) -> str:
        """
        Advance the game by one tick and return what happened:
        "over", "grow", "step", or None if the game had already ended.
        """
        if self.is_over:
            return None
        self.ticks += 1

        if self.snake.would_hit(self.wall):
            self._finish(STATE_OVER, "wall")
            return "over"
        if self.snake.would_bite():
            self._finish(STATE_OVER, "self")
            return "over"

        if self.snake.next_head() == self.food:
            self.snake.grow()
            self.score += 1
            self.place_food()
            return "grow"

        self.snake.step()
        return "step"

    def place_food(self) -> Cell:
        """
        Sample the interior lattice until a cell off the snake comes up.
        A snake covering the whole interior wins instead.
        """
        if len(self.snake) >= INTERIOR_SIZE:
            self._finish(STATE_WON, "won")
            return self.food

        samples = 0
        while True:
            samples += 1
            food = Cell(self.rng.randrange(*INTERIOR_X), self.rng.randrange(*INTERIOR_Y))
            if not self.snake.overlaps(food):
                break
        self.food = food
        logger.debug("food at %r after %d sample(s)", food, samples)
        return food

    # ── Private helpers ──────────────────────────────────────────
    def _finish(self, state: str, reason: str) -> None:
        self.state = state
        self.reason = reason
        logger.info("game ended (%s): score=%d ticks=%d length=%d",
                    reason, self.score, self.ticks, len(self.snake))
