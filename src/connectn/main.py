from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from connectn import config
from connectn.errors import SettingsError
from connectn.game.controller import run_game
from connectn.settings import GameSettings
from connectn.ui.menu import run_setup


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectn", description="Play Connect-N at the console.")
    ap.add_argument("--rows", type=int, default=None, help=f"Board rows (default {config.ROWS})")
    ap.add_argument("--cols", type=int, default=None, help=f"Board columns (default {config.COLS})")
    ap.add_argument("--players", type=int, default=None, help=f"Number of players (default {config.PLAYERS})")
    ap.add_argument("--connect", type=int, default=None, help=f"Tokens in a row to win (default {config.CONNECT_N})")

    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")

    ap.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    ap.add_argument("--log-file", type=str, default=None, help="Also write log records to this file")
    return ap


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def settings_from_args(args: argparse.Namespace) -> Optional[GameSettings]:
    """None when no game flags were given, meaning: ask interactively."""
    given = (args.rows, args.cols, args.players, args.connect)
    if all(v is None for v in given):
        return None
    return GameSettings(
        rows=config.ROWS if args.rows is None else args.rows,
        cols=config.COLS if args.cols is None else args.cols,
        players=config.PLAYERS if args.players is None else args.players,
        win_length=config.CONNECT_N if args.connect is None else args.connect,
    ).validate()


def main(argv: Optional[List[str]] = None, read: Callable[[str], str] = input) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    try:
        settings = settings_from_args(args)
    except SettingsError as e:
        print(e)
        return 2

    try:
        if settings is None:
            settings = run_setup(read)
        run_game(settings, read=read)
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
        return 130

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
