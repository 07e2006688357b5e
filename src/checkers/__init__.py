"""8x8 Draughts Rules Engine
Move generation, mandatory captures, multi-jump chains and promotion.

Package layout:
    checkers/
    ├── __init__.py     # This file - public exports
    ├── rules.py        # Rule constants (board size, directions, promotion rows)
    ├── types.py        # Player, Piece, Move, Outcome
    ├── errors.py       # Exceptions and Rejection values
    ├── board.py        # Board representation
    ├── movegen.py      # Move generation and capture/mobility checks
    ├── game_state.py   # GameState, move application, terminal evaluation
    ├── engine.py       # Session state machine (select / move / game over)
    ├── config.py       # YAML settings (logging, display)
    └── utils.py        # Logger setup and coordinate parsing
"""

from .types import Player, PieceType, Piece, Position, Move, Outcome
from .errors import (
    CheckersError,
    OffBoardError,
    InvalidSquareError,
    IllegalMoveError,
    Rejection,
    RejectionKind,
)
from .board import Board
from .movegen import (
    legal_moves,
    piece_moves,
    has_mandatory_capture,
    player_has_any_capture,
    player_has_any_move,
    movable_pieces,
)
from .game_state import GameState, apply_move, evaluate_outcome
from .engine import Engine, Phase, TurnResult

__version__ = "1.0.0"

__all__ = [
    'Player',
    'PieceType',
    'Piece',
    'Position',
    'Move',
    'Outcome',
    'CheckersError',
    'OffBoardError',
    'InvalidSquareError',
    'IllegalMoveError',
    'Rejection',
    'RejectionKind',
    'Board',
    'legal_moves',
    'piece_moves',
    'has_mandatory_capture',
    'player_has_any_capture',
    'player_has_any_move',
    'movable_pieces',
    'GameState',
    'apply_move',
    'evaluate_outcome',
    'Engine',
    'Phase',
    'TurnResult',
]
