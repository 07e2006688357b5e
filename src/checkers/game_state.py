"""Game state management for 8x8 draughts."""

import logging
from typing import Optional, List, Iterable
from dataclasses import dataclass

from .types import Move, Outcome, Player, Position
from .board import Board
from .errors import IllegalMoveError
from .movegen import (
    has_mandatory_capture,
    legal_moves,
    piece_moves,
    player_has_any_move,
)

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Complete game state including board and turn information.

    This class is treated as immutable - apply_move returns a new state.

    Attributes:
        board: The pieces on the board.
        current_player: The player whose turn it is.
        forced_piece: Square of a piece in the middle of a multi-jump. While
                      set, it is the only piece that may move, and it may
                      only capture.
        must_capture: True iff the current player has a capture somewhere.
        last_move_promoted: True if the move that produced this state
                            crowned a man.
    """
    board: Board
    current_player: Player
    forced_piece: Optional[Position] = None
    must_capture: bool = False
    last_move_promoted: bool = False

    @classmethod
    def initial(cls) -> "GameState":
        """Create the initial game state."""
        return cls.from_board(Board.initial(), Player.ONE)

    @classmethod
    def from_board(cls, board: Board, current_player: Player = Player.ONE) -> "GameState":
        """Create a state for an arbitrary position with the capture flag derived."""
        state = cls(board=board, current_player=current_player)
        state.must_capture = has_mandatory_capture(state)
        return state

    @property
    def in_continuation(self) -> bool:
        """True while a piece is locked into a multi-jump."""
        return self.forced_piece is not None

    def legal_moves(self, origin: Position, captures_only: bool = False) -> List[Move]:
        """Get the legal moves for the piece on origin."""
        return legal_moves(self, origin, captures_only)

    def apply_move(self, move: Move) -> "GameState":
        """
        Apply a move and return the new game state.

        The original state is not modified. The move must be one of
        legal_moves(move.origin); anything else raises IllegalMoveError
        before the board is touched.
        """
        if move not in legal_moves(self, move.origin):
            raise IllegalMoveError(f"{move!r} is not legal for player {int(self.current_player)}")

        new_board = self.board.clone()
        piece = new_board.remove_piece(move.origin)

        for capture_pos in move.captures:
            new_board.remove_piece(capture_pos)

        promoted = not piece.is_king and move.destination[0] == Board.promotion_row(piece.player)
        if promoted:
            piece = piece.promote()

        new_board.set_piece(move.destination, piece)

        # Promotion ends the turn even if more captures would be available
        if move.is_capture and not promoted and piece_moves(new_board, move.destination, captures_only=True):
            logger.debug("Player %d must continue jumping from %s", self.current_player, move.destination)
            return GameState(
                board=new_board,
                current_player=self.current_player,
                forced_piece=move.destination,
                must_capture=True,
            )

        next_state = GameState.from_board(new_board, self.current_player.opponent())
        next_state.last_move_promoted = promoted
        return next_state

    def outcome(self) -> Outcome:
        """Evaluate whether the game has ended."""
        return evaluate_outcome(self)

    def is_terminal(self) -> bool:
        """Check if the game has ended."""
        return self.outcome().is_over

    def winner(self) -> Optional[Player]:
        """Get the winner of the game, or None if it is still going."""
        return self.outcome().winner

    def to_compact(self) -> dict:
        """Convert game state to compact JSON-serializable format."""
        data = self.board.to_compact()
        data["turn"] = int(self.current_player)
        data["forced_piece"] = list(self.forced_piece) if self.forced_piece is not None else None
        return data

    @classmethod
    def from_compact(cls, data: dict) -> "GameState":
        """
        Create a game state from compact format.

        A forced_piece must hold a piece of the player to move that still
        has a capture; anything else raises ValueError.
        """
        board = Board.from_compact(data)
        current_player = Player(data.get("turn", int(Player.ONE)))
        forced = data.get("forced_piece")
        if forced is None:
            return cls.from_board(board, current_player)

        forced = Board.check_position(forced)
        piece = board.get_piece(forced)
        if piece is None or piece.player != current_player:
            raise ValueError(f"Forced piece {forced} is not a piece of player {int(current_player)}")
        if not piece_moves(board, forced, captures_only=True):
            raise ValueError(f"Forced piece {forced} has no capture to continue with")
        return cls(board, current_player, forced_piece=forced, must_capture=True)

    def __str__(self) -> str:
        lines = [
            f"Turn: Player {int(self.current_player)}",
            str(self.board),
        ]
        if self.forced_piece is not None:
            lines.append(f"Must continue jumping with {self.forced_piece}")
        winner = self.winner()
        if winner is not None:
            lines.append(f"Game Over! Winner: Player {int(winner)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GameState(player={self.current_player}, forced={self.forced_piece})"


def apply_move(
    state: GameState,
    origin: Position,
    destination: Position,
    captured: Iterable[Position] = (),
) -> GameState:
    """Apply the move origin -> destination capturing the given squares."""
    return state.apply_move(Move(tuple(origin), tuple(destination), tuple(tuple(c) for c in captured)))


def evaluate_outcome(state: GameState) -> Outcome:
    """
    Decide whether either player has lost.

    A player loses with no pieces left, or with pieces that have no legal
    move. Both players are checked regardless of whose turn it is, since a
    capture can leave the opponent immobile.
    """
    board = state.board

    if not board.has_pieces(Player.TWO) or not player_has_any_move(board, Player.TWO):
        return Outcome.PLAYER_ONE_WINS
    if not board.has_pieces(Player.ONE) or not player_has_any_move(board, Player.ONE):
        return Outcome.PLAYER_TWO_WINS
    return Outcome.ONGOING
