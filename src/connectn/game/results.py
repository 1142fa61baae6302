from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Union

from connectn.types import Coord, Player


@dataclass(frozen=True, slots=True)
class Continue:
    """The token was placed and the game goes on."""

    @property
    def ended(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Win:
    player: Player
    turn: int  # 1-based turn on which the run was completed
    line: Tuple[Coord, ...] = field(default=(), compare=False)

    @property
    def ended(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Tie:
    """The board filled up without anyone completing a run."""

    @property
    def ended(self) -> bool:
        return True


PlacementResult = Union[Continue, Win, Tie]
