from __future__ import annotations
from dataclasses import dataclass

from connectn.config import (
    COLS,
    CONNECT_N,
    MAX_DIM,
    MAX_PLAYERS,
    MIN_DIM,
    MIN_PLAYERS,
    PLAYERS,
    PLAYER_TOKENS,
    ROWS,
)
from connectn.errors import SettingsError


@dataclass(frozen=True, slots=True)
class GameSettings:
    rows: int = ROWS
    cols: int = COLS
    players: int = PLAYERS
    win_length: int = CONNECT_N

    def validate(self) -> "GameSettings":
        """
        Check the values the setup dialog accepts.
        GameState trusts its inputs, so this is the only place the ranges live.
        """
        for label, value in (("Rows", self.rows), ("Columns", self.cols)):
            if not MIN_DIM <= value <= MAX_DIM:
                raise SettingsError(f"{label} must be between {MIN_DIM} and {MAX_DIM}.")

        hi = min(MAX_PLAYERS, len(PLAYER_TOKENS))
        if not MIN_PLAYERS <= self.players <= hi:
            raise SettingsError(f"Players must be between {MIN_PLAYERS} and {hi}.")

        longest = min(self.rows, self.cols)
        if not 1 <= self.win_length <= longest:
            raise SettingsError(f"Win length must be between 1 and {longest}.")

        return self
