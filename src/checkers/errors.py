"""Error and rejection types for the draughts rules engine.

Two families live here:

* Exceptions for programming errors. Off-board coordinates and pieces placed
  on light squares should never reach the engine, so they fail loudly.
* ``Rejection`` values. Selecting the wrong square or asking for a move that
  is not legal is an ordinary outcome of user input; the engine session
  returns a ``Rejection`` instead of raising and leaves its state untouched.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .types import Position


class CheckersError(Exception):
    """Base class for engine errors."""


class OffBoardError(CheckersError, ValueError):
    """A coordinate outside the 8x8 board was passed to the engine."""

    def __init__(self, pos):
        super().__init__(f"Position {pos} is off the board")
        self.pos = pos


class InvalidSquareError(CheckersError, ValueError):
    """A piece was placed on a light (unplayable) square."""

    def __init__(self, pos):
        super().__init__(f"Position {pos} is not a playable dark square")
        self.pos = pos


class IllegalMoveError(CheckersError, ValueError):
    """A move outside the current legal-move set was applied."""


class RejectionKind(Enum):
    """Categories of rejected engine requests."""
    INVALID_SELECTION = "invalid_selection"
    ILLEGAL_MOVE = "illegal_move"


@dataclass(frozen=True)
class Rejection:
    """A request the engine declined. No state was changed."""
    kind: RejectionKind
    reason: str
    pos: Optional[Position] = None

    @classmethod
    def invalid_selection(cls, reason: str, pos: Optional[Position] = None) -> "Rejection":
        return cls(RejectionKind.INVALID_SELECTION, reason, pos)

    @classmethod
    def illegal_move(cls, reason: str, pos: Optional[Position] = None) -> "Rejection":
        return cls(RejectionKind.ILLEGAL_MOVE, reason, pos)
