"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Window & Grid ─────────────────────────────────────────────────
COLS, ROWS      = 40, 30
CELL            = 20
WIDTH, HEIGHT   = COLS * CELL, ROWS * CELL      # 800 x 600
TITLE           = "Snake"

# ── Pacing ────────────────────────────────────────────────────────
TICK_MS         = 100    # delay after each rendered tick (~10 Hz)

# ── Colors ────────────────────────────────────────────────────────
BLACK       = (0,   0,   0)
SNAKE_COL   = (0,   255, 0)
FOOD_COL    = (255, 0,   0)

# ── Starting state ────────────────────────────────────────────────
START_CELL  = (5, 5)
START_FOOD  = (10, 10)
