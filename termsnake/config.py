"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Grid ──────────────────────────────────────────────────────────
CELL_W, CELL_H    = 2, 1       # one cell is two columns wide, looks square
GROUND_W, GROUND_H = 64, 32
MIN_COLS          = GROUND_W
MIN_ROWS          = GROUND_H + 1

# Cell-aligned interior lattice, as half-open ranges (start, stop, step)
INTERIOR_X = (2 * CELL_W, GROUND_W - CELL_W, CELL_W)
INTERIOR_Y = (2 * CELL_H, GROUND_H, CELL_H)

# ── Timing ────────────────────────────────────────────────────────
TIME_STEP_NS = 150_000_000             # one game tick, monotonic nanoseconds
REFRESH      = TIME_STEP_NS / 2 / 1e9  # one render + input cycle, seconds

# ── Gameplay ──────────────────────────────────────────────────────
START_POS = (GROUND_W // 2, GROUND_H // 2)
START_LEN = 3

# ── Colours (blessed attribute names) ─────────────────────────────
FOOD_COL  = "red"
SNAKE_COL = "blue"
WALL_COL  = "white"
TITLE_COL = "magenta"
SCORE_COL = "green"

# ── Glyphs & HUD ──────────────────────────────────────────────────
BLOCK     = "█"
TITLE     = "Snake Game"
TITLE_POS = (10, 0)
SCORE_POS = (40, 0)

# ── Game States ───────────────────────────────────────────────────
STATE_PLAYING = "playing"
STATE_OVER    = "over"
STATE_WON     = "won"

# ── Environment ───────────────────────────────────────────────────
LOG_ENV = "TERMSNAKE_LOG"
