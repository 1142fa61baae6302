from __future__ import annotations
from typing import Optional, Set

from connectn import config
from connectn.game.state import Snapshot
from connectn.types import Cell, Coord
from connectn.ui.colors import c, player_color, BOLD, DIM, FG_CYAN, FG_GRAY, REVERSE, RESET


def token(player: int) -> str:
    return config.PLAYER_TOKENS[player]


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    return c(token(cell), player_color(cell))


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def banner(snap: Snapshot) -> str:
    if snap.game_over:
        if snap.winner is None:
            return "The board's full, it's a tie!"
        return f"{token(snap.winner)} won on turn {snap.turn + 1}!"
    return f"Turn {snap.turn}, {token(snap.current)} to move."


def board_lines(snap: Snapshot) -> list[str]:
    hl: Set[Coord] = set(snap.winning_line)

    lines = [c("   " + " ".join(str(i + 1) for i in range(snap.cols)), DIM)]
    for r in range(snap.rows):
        parts = []
        for cidx in range(snap.cols):
            p = _piece(snap.grid[r][cidx])
            if (r, cidx) in hl and config.USE_COLOR:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * snap.cols - 1), DIM))
    return lines


def render(snap: Snapshot, status: str = "", footer: Optional[str] = None) -> None:
    clear_screen()

    print(c(f"CONNECT {snap.win_length}", BOLD))
    print(c(status, FG_CYAN) if status else "")

    for line in board_lines(snap):
        print(line)

    print(banner(snap))
    if footer is None and not snap.game_over:
        footer = f"   Enter 1-{snap.cols} to drop. Enter q to quit."
    if footer:
        print(c(footer, DIM))
