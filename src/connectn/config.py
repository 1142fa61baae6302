# src/connectn/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4
PLAYERS = 2

# Setup dialog limits (the engine itself does not enforce these)
MIN_DIM = 1
MAX_DIM = 9
MIN_PLAYERS = 2
MAX_PLAYERS = 9

# One display token per player index
PLAYER_TOKENS = ("X", "O", "#", "@", "$", "%", "&", "+", "*")

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
