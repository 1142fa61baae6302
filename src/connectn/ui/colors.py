from __future__ import annotations
from connectn import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"
FG_BRIGHT_RED = "\033[91m"
FG_BRIGHT_GREEN = "\033[92m"
FG_BRIGHT_BLUE = "\033[94m"

# indexed by player; wraps if there are more players than colours
PLAYER_COLORS = (
    FG_RED,
    FG_YELLOW,
    FG_GREEN,
    FG_BLUE,
    FG_MAGENTA,
    FG_BRIGHT_RED,
    FG_BRIGHT_GREEN,
    FG_BRIGHT_BLUE,
    FG_CYAN,
)


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def player_color(player: int) -> str:
    return PLAYER_COLORS[player % len(PLAYER_COLORS)]
