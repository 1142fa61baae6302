from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from connectn.core.board import Board
from connectn.core.rules import winning_line
from connectn.errors import GameAlreadyOver, InvalidColumn
from connectn.game.results import Continue, PlacementResult, Tie, Win
from connectn.types import Cell, Coord, Move, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of a game, enough to draw it."""

    grid: Tuple[Tuple[Cell, ...], ...]
    rows: int
    cols: int
    player_count: int
    win_length: int
    current: Player
    turn: int
    winner: Optional[Player]
    game_over: bool
    last_move: Optional[Coord] = None
    winning_line: Tuple[Coord, ...] = ()

    @property
    def is_tie(self) -> bool:
        return self.game_over and self.winner is None


@dataclass(slots=True)
class GameState:
    board: Board
    player_count: int
    win_length: int
    current: Player = Player(0)
    turn: int = 0
    winner: Optional[Player] = None
    game_over: bool = False
    last_move: Optional[Coord] = None
    winning_line: Tuple[Coord, ...] = ()

    @classmethod
    def new(cls, rows: int, cols: int, player_count: int, win_length: int) -> "GameState":
        """
        Start an empty game. Inputs are trusted: the caller guarantees they
        are all >= 1 and that win_length <= min(rows, cols).
        """
        return cls(board=Board(rows, cols), player_count=player_count, win_length=win_length)

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def place_token(self, column: int) -> PlacementResult:
        """
        Drop the current player's token into `column` (1-based).

        Either the move fully happens or an error is raised and nothing
        changes: InvalidColumn, ColumnFull, or GameAlreadyOver.
        """
        if self.game_over:
            raise GameAlreadyOver()
        if column < 1 or column > self.cols:
            raise InvalidColumn(column, self.cols)

        player = self.current
        col = column - 1
        row = self.board.drop(Move(col), player)
        self.last_move = (row, col)
        logger.debug("turn %d: player %d -> (%d, %d)", self.turn + 1, player, row, col)

        line = winning_line(self.board, row, col, self.win_length)
        if line is not None:
            self.winner = player
            self.game_over = True
            self.winning_line = line
            logger.info("player %d wins on turn %d", player, self.turn + 1)
            return Win(player, self.turn + 1, line)

        if self._next_turn() >= self.board.size:
            self.game_over = True
            logger.info("board full after %d turns, tie", self.turn)
            return Tie()

        return Continue()

    def _next_turn(self) -> int:
        self.current = Player((self.current + 1) % self.player_count)
        self.turn += 1
        return self.turn

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid=self.board.frozen(),
            rows=self.rows,
            cols=self.cols,
            player_count=self.player_count,
            win_length=self.win_length,
            current=self.current,
            turn=self.turn,
            winner=self.winner,
            game_over=self.game_over,
            last_move=self.last_move,
            winning_line=self.winning_line,
        )
