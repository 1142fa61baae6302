# src/connectn/types.py

from __future__ import annotations
from typing import NewType, Optional, Tuple

Player = NewType("Player", int)  # index 0..player_count-1
Cell = Optional[Player]
Coord = Tuple[int, int]  # (row, col), row 0 is the top
Move = NewType("Move", int)  # column index 0..cols-1
