# src/dropfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# Search
SEARCH_DEPTH = 6
WIN_SCORE = 1_000_000
DRAW_SCORE = 0

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5

# Logging (stderr sink level; LOG_FILE adds a rotating file sink)
LOG_LEVEL = "WARNING"
LOG_FILE = None
