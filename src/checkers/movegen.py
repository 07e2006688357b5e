"""Move generation for 8x8 draughts."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

from .types import Move, Player, Position, Piece
from .board import Board
from .rules import FORWARD_DIRECTIONS_P1, FORWARD_DIRECTIONS_P2, ALL_DIRECTIONS

if TYPE_CHECKING:
    from .game_state import GameState


class StepKind(Enum):
    """What a piece can do on a square it reaches."""
    MOVE = "move"
    CAPTURE = "capture"


@dataclass(frozen=True)
class RayStep:
    """A reachable square, and the piece jumped to get there (if any)."""
    kind: StepKind
    pos: Position
    captured: Optional[Position] = None


def get_forward_directions(player: Player) -> List[Tuple[int, int]]:
    """Get the forward diagonal directions for a player."""
    return FORWARD_DIRECTIONS_P1 if player == Player.ONE else FORWARD_DIRECTIONS_P2


def scan_ray(board: Board, pos: Position, piece: Piece, direction: Tuple[int, int]) -> Iterator[RayStep]:
    """
    Walk a king's diagonal ray outward from pos.

    Yields MOVE steps for empty squares until a piece is met. An opposing
    piece followed by an empty square opens a capture: every consecutive
    empty square past it is yielded as a CAPTURE landing of that same piece.
    The ray ends at the board edge, at an ally, at an opponent that cannot
    be jumped, or at the first occupied square after the landing run.
    """
    dr, dc = direction
    row, col = pos
    jumped: Optional[Position] = None

    distance = 1
    while True:
        scan_row, scan_col = row + distance * dr, col + distance * dc
        if not Board.in_bounds(scan_row, scan_col):
            return

        scan_pos = (scan_row, scan_col)
        occupant = board.get_piece(scan_pos)

        if jumped is not None:
            # Looking for landing squares beyond the jumped piece
            if occupant is not None:
                return
            yield RayStep(StepKind.CAPTURE, scan_pos, jumped)
        elif occupant is None:
            yield RayStep(StepKind.MOVE, scan_pos)
        elif piece.is_ally(occupant):
            return
        else:
            land_row, land_col = scan_row + dr, scan_col + dc
            if not Board.in_bounds(land_row, land_col) or not board.is_empty((land_row, land_col)):
                return
            jumped = scan_pos

        distance += 1


def _king_steps(board: Board, pos: Position, piece: Piece) -> Iterator[RayStep]:
    for direction in ALL_DIRECTIONS:
        yield from scan_ray(board, pos, piece, direction)


def _man_steps(board: Board, pos: Position, piece: Piece) -> Iterator[RayStep]:
    """Men capture in all four directions but step only forward."""
    row, col = pos
    forward = get_forward_directions(piece.player)

    for dr, dc in ALL_DIRECTIONS:
        over_row, over_col = row + dr, col + dc
        land_row, land_col = row + 2 * dr, col + 2 * dc

        if Board.in_bounds(land_row, land_col) and board.is_empty((land_row, land_col)):
            victim = board.get_piece((over_row, over_col))
            if victim is not None and not piece.is_ally(victim):
                yield RayStep(StepKind.CAPTURE, (land_row, land_col), (over_row, over_col))

        if (dr, dc) in forward and Board.in_bounds(over_row, over_col) and board.is_empty((over_row, over_col)):
            yield RayStep(StepKind.MOVE, (over_row, over_col))


def piece_moves(
    board: Board,
    pos: Position,
    captures_only: bool = False,
    must_capture: bool = False,
) -> List[Move]:
    """
    Generate the moves of whatever piece stands on pos.

    No turn or ownership checks are made here; this is the board-level
    generator shared by legal_moves and the capture/mobility checks.

    Args:
        board: The board to inspect.
        pos: Square of the piece to move.
        captures_only: Never return simple moves.
        must_capture: The owner has a capture somewhere, so simple moves are
                      suppressed for every piece.

    Returns:
        Capture moves if the piece has any, otherwise its simple moves
        (empty when captures_only or must_capture is set).
    """
    pos = Board.check_position(pos)
    piece = board.get_piece(pos)
    if piece is None:
        return []

    steps = _king_steps(board, pos, piece) if piece.is_king else _man_steps(board, pos, piece)

    captures = []
    simple = []
    for step in steps:
        if step.kind is StepKind.CAPTURE:
            captures.append(Move(pos, step.pos, (step.captured,)))
        elif not captures_only and not must_capture:
            simple.append(Move(pos, step.pos))

    # Captures always take priority over simple moves
    if captures:
        return captures
    return [] if captures_only else simple


def legal_moves(state: "GameState", origin: Position, captures_only: bool = False) -> List[Move]:
    """
    Legal moves for the piece on origin in the given state.

    Returns an empty list when origin is empty, holds an opponent piece, or
    is not the piece locked into a multi-jump. Raises OffBoardError for a
    coordinate outside the board.
    """
    origin = Board.check_position(origin)
    piece = state.board.get_piece(origin)
    if piece is None or piece.player != state.current_player:
        return []
    if state.forced_piece is not None and origin != state.forced_piece:
        return []
    return piece_moves(state.board, origin, captures_only, state.must_capture)


def player_has_any_capture(board: Board, player: Player) -> bool:
    """Check whether any piece of player has a capture available."""
    for pos, _ in board.get_pieces(player):
        if piece_moves(board, pos, captures_only=True):
            return True
    return False


def has_mandatory_capture(state: "GameState") -> bool:
    """Check whether the player to move is obliged to capture."""
    return player_has_any_capture(state.board, state.current_player)


def player_has_any_move(board: Board, player: Player) -> bool:
    """
    Check whether player could move any piece if it were their turn.

    The mandatory-capture flag is evaluated for player on the spot, so this
    does not depend on (or touch) whose turn it actually is.
    """
    must_capture = player_has_any_capture(board, player)
    for pos, _ in board.get_pieces(player):
        if piece_moves(board, pos, must_capture=must_capture):
            return True
    return False


def movable_pieces(state: "GameState") -> Dict[Position, List[Move]]:
    """Map every piece the current player may select to its legal moves."""
    result = {}
    for pos, _ in state.board.get_pieces(state.current_player):
        moves = legal_moves(state, pos)
        if moves:
            result[pos] = moves
    return result
