from __future__ import annotations


class PlacementError(ValueError):
    """A move was rejected. The game state is left exactly as it was."""


class InvalidColumn(PlacementError):
    def __init__(self, column: int, cols: int) -> None:
        super().__init__(f"Column must be between 1 and {cols}.")
        self.column = column
        self.cols = cols


class ColumnFull(PlacementError):
    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column} is full! Please choose somewhere else.")
        self.column = column


class GameAlreadyOver(PlacementError):
    def __init__(self) -> None:
        super().__init__("The game is already over.")


class SettingsError(ValueError):
    pass
