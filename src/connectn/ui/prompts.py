from __future__ import annotations
from typing import Callable, Optional

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str) -> Optional[int]:
    """
    Turn a keystroke line into a 1-based column, or None to quit.
    Range checks are left to the engine.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdecimal():
        raise ValueError("Please input a number, or q to quit.")
    return int(s)


def ask_int(prompt: str, lo: int, hi: int, default: int, read: Callable[[str], str] = input) -> int:
    while True:
        s = read(f"{prompt} [{lo}-{hi}, default {default}]: ").strip()
        if not s:
            return default
        if not s.isdecimal():
            print("Please input a number!")
            continue
        n = int(s)
        if lo <= n <= hi:
            return n
        print(f"Please choose a number between {lo} and {hi}.")
