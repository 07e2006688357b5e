"""
Pytest configuration and fixtures.
"""

import sys
import logging
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at a scratch file and drop any cached config."""
    from checkers import config

    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "settings.yaml"))
    config.set_config(None)
    yield tmp_path / "settings.yaml"
    config.set_config(None)


@pytest.fixture(autouse=True)
def reset_checkers_logger():
    """Remove handlers setup_logger attached during a test."""
    yield
    logger = logging.getLogger("checkers")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def initial_game_state():
    """Create an initial game state."""
    from checkers.game_state import GameState
    return GameState.initial()


@pytest.fixture
def sample_board():
    """Create an initial board."""
    from checkers.board import Board
    return Board.initial()


@pytest.fixture
def engine():
    """Create an engine at the standard starting position."""
    from checkers.engine import Engine
    return Engine()


@pytest.fixture
def make_state():
    """
    Build a GameState from piece lists.

    Usage: make_state(p1_men=[(2, 1)], p2_kings=[(5, 4)], turn=Player.TWO)
    """
    from checkers.board import Board
    from checkers.game_state import GameState
    from checkers.types import Player

    def _make(p1_men=(), p1_kings=(), p2_men=(), p2_kings=(), turn=Player.ONE):
        board = Board.from_compact({
            "p1_men": list(p1_men),
            "p1_kings": list(p1_kings),
            "p2_men": list(p2_men),
            "p2_kings": list(p2_kings),
        })
        return GameState.from_board(board, turn)

    return _make
