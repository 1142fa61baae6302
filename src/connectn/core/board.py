
# src/connectn/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from connectn.config import ROWS, COLS
from connectn.errors import ColumnFull, InvalidColumn
from connectn.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def frozen(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def drop(self, col: Move, player: Player) -> int:
        """
        Drop a token into column `col` (0-based) and return the row it lands on.
        Raises before touching the grid if the column is out of range or full.
        """
        c = int(col)
        if c < 0 or c >= self.cols:
            raise InvalidColumn(c + 1, self.cols)

        # gravity: first empty cell from the bottom up
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = player
                return r

        raise ColumnFull(c + 1)
