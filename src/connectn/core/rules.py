from __future__ import annotations
from typing import Optional, Tuple

from connectn.core.board import Board
from connectn.types import Coord, Player

# (dr, dc) for one half-line of each axis; the other half is the negation.
# Row 0 is the top, so dr = 1 walks down the board.
VERTICAL = (1, 0)
HORIZONTAL = (0, 1)
DIAG_DOWN = (1, 1)  # "\"
DIAG_UP = (-1, 1)  # "/"

BIDIRECTIONAL = (HORIZONTAL, DIAG_UP, DIAG_DOWN)


def count_run(board: Board, row: int, col: int, dr: int, dc: int, player: Player, limit: int) -> int:
    """
    Count same-player cells walking outward from (row, col), not counting
    (row, col) itself. Stops at the first mismatch, empty cell, edge, or
    after `limit` steps.
    """
    g = board.grid
    n = 0
    r, c = row + dr, col + dc
    while n < limit and board.in_bounds(r, c) and g[r][c] == player:
        n += 1
        r += dr
        c += dc
    return n


def _line(row: int, col: int, dr: int, dc: int, back: int, forward: int) -> Tuple[Coord, ...]:
    return tuple((row + i * dr, col + i * dc) for i in range(-back, forward + 1))


def winning_line(board: Board, row: int, col: int, win_length: int) -> Optional[Tuple[Coord, ...]]:
    """
    Local win check anchored at the token just placed at (row, col).

    Only the four lines through that cell can have changed, so this is
    O(win_length) instead of a full-board scan. Returns the run's cells
    (ordered along the axis) or None.
    """
    player = board.grid[row][col]
    if player is None:
        return None

    reach = win_length - 1

    # Vertical: nothing can sit above the newest token in its column,
    # so the run only extends downward.
    dr, dc = VERTICAL
    down = count_run(board, row, col, dr, dc, player, reach)
    if 1 + down >= win_length:
        return _line(row, col, dr, dc, 0, down)

    # Horizontal and both diagonals: two half-lines plus the placed cell once.
    for dr, dc in BIDIRECTIONAL:
        fwd = count_run(board, row, col, dr, dc, player, reach)
        back = count_run(board, row, col, -dr, -dc, player, reach)
        if 1 + fwd + back >= win_length:
            return _line(row, col, dr, dc, back, fwd)

    return None


def is_win(board: Board, row: int, col: int, win_length: int) -> bool:
    return winning_line(board, row, col, win_length) is not None
