"""Connect-N: a gravity grid game for any board size, player count and run length."""

__version__ = "0.1.0"
