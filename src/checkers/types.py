"""Type definitions for the draughts rules engine."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple, Optional


class Player(IntEnum):
    """Player identifiers."""
    ONE = 1  # Starts on rows 0-2, moves downward (increasing row)
    TWO = 2  # Starts on rows 5-7, moves upward (decreasing row)

    def opponent(self) -> "Player":
        """Return the opposing player."""
        return Player.TWO if self == Player.ONE else Player.ONE


class PieceType(Enum):
    """Types of pieces."""
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """A game piece on the board."""
    player: Player
    piece_type: PieceType

    @property
    def is_king(self) -> bool:
        """Check if this piece is a king."""
        return self.piece_type == PieceType.KING

    def promote(self) -> "Piece":
        """Return a promoted (king) version of this piece."""
        return Piece(self.player, PieceType.KING)

    def is_ally(self, other: Optional["Piece"]) -> bool:
        """Check if another piece belongs to the same player."""
        return other is not None and other.player == self.player


# Type alias for board positions
Position = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    """
    A single step taken by one piece.

    Attributes:
        origin: Square the piece moves from.
        destination: Square the piece lands on.
        captures: Positions of the pieces jumped over, in order. Empty for
                  a simple move. A multi-jump is played as a sequence of
                  Moves, one per landing.
    """
    origin: Position
    destination: Position
    captures: Tuple[Position, ...] = ()

    @property
    def is_capture(self) -> bool:
        """Check if this move captures anything."""
        return len(self.captures) > 0

    @property
    def num_captures(self) -> int:
        """Number of pieces captured by this move."""
        return len(self.captures)

    def to_dict(self) -> dict:
        """Convert move to a JSON-serializable dict."""
        return {
            "origin": list(self.origin),
            "destination": list(self.destination),
            "captures": [list(c) for c in self.captures],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Move":
        """Create a Move from a dict representation."""
        return cls(
            origin=tuple(data["origin"]),
            destination=tuple(data["destination"]),
            captures=tuple(tuple(c) for c in data.get("captures", [])),
        )

    def __repr__(self) -> str:
        (r1, c1), (r2, c2) = self.origin, self.destination
        if self.captures:
            taken = ",".join(f"({r},{c})" for r, c in self.captures)
            return f"Move(({r1},{c1})x({r2},{c2}), captures={taken})"
        return f"Move(({r1},{c1})->({r2},{c2}))"


class Outcome(Enum):
    """Result of evaluating a position for a terminal condition."""
    ONGOING = "ongoing"
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"

    @classmethod
    def winner_is(cls, player: Player) -> "Outcome":
        """Return the outcome in which the given player has won."""
        return cls.PLAYER_ONE_WINS if player == Player.ONE else cls.PLAYER_TWO_WINS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None while the game is ongoing."""
        if self is Outcome.PLAYER_ONE_WINS:
            return Player.ONE
        if self is Outcome.PLAYER_TWO_WINS:
            return Player.TWO
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.ONGOING
