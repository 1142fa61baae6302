from __future__ import annotations
import logging
from typing import Callable, Optional

from connectn.errors import PlacementError
from connectn.game.results import PlacementResult
from connectn.game.state import GameState, Snapshot
from connectn.settings import GameSettings
from connectn.ui.prompts import parse_move
from connectn.ui.render import render, token

logger = logging.getLogger(__name__)

Show = Callable[[Snapshot, str], None]


def run_game(
    settings: GameSettings,
    read: Callable[[str], str] = input,
    show: Show = render,
) -> Optional[PlacementResult]:
    """
    Play one game at the console. Returns the final Win/Tie, or None if a
    player quits.
    """
    state = GameState.new(settings.rows, settings.cols, settings.players, settings.win_length)
    logger.info(
        "new game: %dx%d, %d players, connect %d",
        settings.rows, settings.cols, settings.players, settings.win_length,
    )
    status = f"Player {token(state.current)} starts."

    while True:
        show(state.snapshot(), status)

        raw = read(f"Player {token(state.current)} move: ")
        try:
            column = parse_move(raw)
            if column is None:
                logger.info("game quit on turn %d", state.turn)
                show(state.snapshot(), "Game quit.")
                return None

            mover = state.current
            result = state.place_token(column)

        except ValueError as e:
            # bad keystrokes and rejected placements alike: same player re-prompts
            if isinstance(e, PlacementError):
                logger.debug("rejected move %r: %s", raw, e)
            status = str(e)
            continue

        if result.ended:
            show(state.snapshot(), "")
            return result

        status = f"Player {token(mover)} chose {column}"
