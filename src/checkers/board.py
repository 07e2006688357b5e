"""Board state representation for 8x8 draughts."""

from typing import Optional, Dict, Iterator, List, Tuple

from .types import Piece, Player, PieceType, Position
from .rules import BOARD_SIZE, PLAYER_ONE_ROWS, PLAYER_TWO_ROWS, PROMOTION_ROW_P1, PROMOTION_ROW_P2
from .errors import OffBoardError, InvalidSquareError


# Default text symbols, keyed like DisplaySettings fields
DEFAULT_SYMBOLS = {
    "empty": ".",
    "p1_man": "o",
    "p1_king": "O",
    "p2_man": "x",
    "p2_king": "X",
}


class Board:
    """
    8x8 draughts board.

    Only dark squares are used: those where (row + col) % 2 == 1.
    Row 0 is the top; Player 1 starts on rows 0-2, Player 2 on rows 5-7.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        """Create an empty board."""
        # Maps position (row, col) -> Piece
        self._pieces: Dict[Position, Piece] = {}

    def clone(self) -> "Board":
        """Create an independent copy of this board."""
        new_board = Board()
        new_board._pieces = dict(self._pieces)
        return new_board

    @classmethod
    def initial(cls) -> "Board":
        """Create a board with the standard initial setup."""
        board = cls()

        for row in PLAYER_ONE_ROWS:
            for col in range(cls.SIZE):
                if cls.is_playable(row, col):
                    board.set_piece((row, col), Piece(Player.ONE, PieceType.MAN))

        for row in PLAYER_TWO_ROWS:
            for col in range(cls.SIZE):
                if cls.is_playable(row, col):
                    board.set_piece((row, col), Piece(Player.TWO, PieceType.MAN))

        return board

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        """Check if a square is a playable (dark) square."""
        return (row + col) % 2 == 1

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if a position is within the board."""
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    @staticmethod
    def check_position(pos: Position) -> Position:
        """Return pos as a (row, col) tuple, raising OffBoardError if it is not on the board."""
        try:
            row, col = pos
        except (TypeError, ValueError):
            raise OffBoardError(pos) from None
        if not Board.in_bounds(row, col):
            raise OffBoardError(pos)
        return row, col

    def get_piece(self, pos: Position) -> Optional[Piece]:
        """Get the piece at a position, or None if empty."""
        pos = self.check_position(pos)
        return self._pieces.get(pos)

    def set_piece(self, pos: Position, piece: Optional[Piece]) -> None:
        """Set or remove a piece at a position."""
        pos = self.check_position(pos)
        if piece is None:
            self._pieces.pop(pos, None)
        else:
            if not self.is_playable(*pos):
                raise InvalidSquareError(pos)
            self._pieces[pos] = piece

    def remove_piece(self, pos: Position) -> Optional[Piece]:
        """Remove and return the piece at a position."""
        pos = self.check_position(pos)
        return self._pieces.pop(pos, None)

    def get_pieces(self, player: Optional[Player] = None) -> Iterator[Tuple[Position, Piece]]:
        """Iterate over all pieces in row-major order, optionally filtered by player."""
        for pos in sorted(self._pieces):
            piece = self._pieces[pos]
            if player is None or piece.player == player:
                yield pos, piece

    def count_pieces(self, player: Player) -> Tuple[int, int]:
        """Count (men, kings) for a player."""
        men = 0
        kings = 0
        for _, piece in self.get_pieces(player):
            if piece.is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    def total_pieces(self, player: Player) -> int:
        """Total number of pieces a player has on the board."""
        return sum(self.count_pieces(player))

    def is_empty(self, pos: Position) -> bool:
        """Check if a position is empty."""
        pos = self.check_position(pos)
        return pos not in self._pieces

    def has_pieces(self, player: Player) -> bool:
        """Check if a player has any pieces on the board."""
        return any(p.player == player for p in self._pieces.values())

    @staticmethod
    def promotion_row(player: Player) -> int:
        """Get the promotion row for a player."""
        return PROMOTION_ROW_P1 if player == Player.ONE else PROMOTION_ROW_P2

    def to_grid(self) -> List[List[Optional[Piece]]]:
        """Return a row-major 8x8 snapshot of the cells (None for empty)."""
        return [
            [self._pieces.get((row, col)) for col in range(self.SIZE)]
            for row in range(self.SIZE)
        ]

    def to_compact(self) -> dict:
        """Convert board to compact JSON-serializable format."""
        p1_men = []
        p1_kings = []
        p2_men = []
        p2_kings = []

        for pos, piece in self.get_pieces():
            pos_list = [pos[0], pos[1]]
            if piece.player == Player.ONE:
                if piece.is_king:
                    p1_kings.append(pos_list)
                else:
                    p1_men.append(pos_list)
            else:
                if piece.is_king:
                    p2_kings.append(pos_list)
                else:
                    p2_men.append(pos_list)

        return {
            "p1_men": p1_men,
            "p1_kings": p1_kings,
            "p2_men": p2_men,
            "p2_kings": p2_kings,
        }

    @classmethod
    def from_compact(cls, data: dict) -> "Board":
        """Create a board from compact format."""
        board = cls()

        for pos in data.get("p1_men", []):
            board.set_piece(tuple(pos), Piece(Player.ONE, PieceType.MAN))
        for pos in data.get("p1_kings", []):
            board.set_piece(tuple(pos), Piece(Player.ONE, PieceType.KING))
        for pos in data.get("p2_men", []):
            board.set_piece(tuple(pos), Piece(Player.TWO, PieceType.MAN))
        for pos in data.get("p2_kings", []):
            board.set_piece(tuple(pos), Piece(Player.TWO, PieceType.KING))

        return board

    def render(self, symbols: Optional[Dict[str, str]] = None, show_coordinates: bool = True) -> str:
        """Render the board as text using the given symbol table."""
        table = dict(DEFAULT_SYMBOLS)
        if symbols:
            table.update(symbols)

        lines = []
        if show_coordinates:
            lines.append("  " + " ".join(str(c) for c in range(self.SIZE)))
        for row in range(self.SIZE):
            cells = []
            for col in range(self.SIZE):
                piece = self._pieces.get((row, col))
                if piece is None:
                    cells.append(table["empty"] if self.is_playable(row, col) else " ")
                else:
                    prefix = "p1" if piece.player == Player.ONE else "p2"
                    suffix = "king" if piece.is_king else "man"
                    cells.append(table[f"{prefix}_{suffix}"])
            line = " ".join(cells)
            lines.append(f"{row} {line}" if show_coordinates else line)
        return "\n".join(lines)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        return f"Board({len(self._pieces)} pieces)"
