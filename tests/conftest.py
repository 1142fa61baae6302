"""
Pytest fixtures for Connect-N tests.
"""

import pytest

from connectn import config
from connectn.game.state import GameState


@pytest.fixture
def classic() -> GameState:
    """Standard 6x7 board, two players, connect four."""
    return GameState.new(6, 7, 2, 4)


@pytest.fixture
def plain_output(monkeypatch):
    """No ANSI codes or screen clearing, so printed output is easy to assert on."""
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
