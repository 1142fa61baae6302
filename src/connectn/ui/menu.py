from __future__ import annotations
from typing import Callable

from connectn import config
from connectn.errors import SettingsError
from connectn.settings import GameSettings
from connectn.ui.prompts import ask_int


def run_setup(read: Callable[[str], str] = input) -> GameSettings:
    """Ask for board size, player count and run length until they fit together."""
    print("Set up a new game (press Enter for the default).")
    while True:
        rows = ask_int("Rows", config.MIN_DIM, config.MAX_DIM, config.ROWS, read)
        cols = ask_int("Columns", config.MIN_DIM, config.MAX_DIM, config.COLS, read)
        players = ask_int("Players", config.MIN_PLAYERS, config.MAX_PLAYERS, config.PLAYERS, read)

        longest = min(rows, cols)
        win_length = ask_int("Tokens in a row to win", 1, longest, min(config.CONNECT_N, longest), read)

        try:
            return GameSettings(rows, cols, players, win_length).validate()
        except SettingsError as e:
            print(f"{e} Let's try again.")
