"""Game engine - drives a single game through selection, moves and game over."""

import logging
from enum import Enum
from typing import Optional, Callable, Iterable, List, Union
from dataclasses import dataclass

from .types import Move, Outcome, Player, Position
from .board import Board
from .errors import Rejection
from .game_state import GameState, evaluate_outcome
from .movegen import legal_moves

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Where the session is in the current turn."""
    AWAITING_SELECTION = "awaiting_selection"
    PIECE_SELECTED = "piece_selected"
    FORCED_CONTINUATION = "forced_continuation"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TurnResult:
    """Result of an applied move."""
    state: GameState
    move: Move
    continuation: bool
    promoted: bool
    outcome: Outcome


class Engine:
    """
    Game engine that holds one game and enforces the turn protocol.

    Callers select a piece, pick one of the returned moves and apply it.
    Requests that break the rules come back as Rejection values and leave
    the engine untouched. Every Engine is independent; nothing is shared
    at module level.
    """

    def __init__(self, state: Optional[GameState] = None):
        self.state: GameState = state if state is not None else GameState.initial()
        self.selected: Optional[Position] = None
        self.selected_moves: List[Move] = []
        self.outcome: Outcome = Outcome.ONGOING

        # Callbacks
        self.on_state_changed: Optional[Callable[[GameState], None]] = None
        self.on_game_over: Optional[Callable[[Outcome], None]] = None

        if self.state.in_continuation:
            self._select_forced_piece()
        else:
            self.outcome = evaluate_outcome(self.state)

    @property
    def phase(self) -> Phase:
        """Current phase of the turn state machine."""
        if self.outcome.is_over:
            return Phase.GAME_OVER
        if self.state.in_continuation:
            return Phase.FORCED_CONTINUATION
        if self.selected is not None:
            return Phase.PIECE_SELECTED
        return Phase.AWAITING_SELECTION

    def reset(self) -> GameState:
        """Start a new game from the standard position."""
        self.state = GameState.initial()
        self.selected = None
        self.selected_moves = []
        self.outcome = Outcome.ONGOING
        logger.info("New game started, Player %d to move", self.state.current_player)
        self._notify_state_changed()
        return self.state

    def get_board(self) -> Board:
        """Snapshot of the board; changes to it do not affect the game."""
        return self.state.board.clone()

    def get_current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.state.current_player

    def legal_moves(self, origin: Position) -> List[Move]:
        """Get legal moves for the piece on origin."""
        return legal_moves(self.state, origin)

    def select_piece(self, pos: Position) -> Union[List[Move], Rejection]:
        """
        Select a piece of the current player.

        Returns its legal moves, or a Rejection if the square is empty,
        belongs to the opponent, is not the piece locked into a multi-jump,
        or the game is over.
        """
        pos = Board.check_position(pos)

        if self.outcome.is_over:
            return self._reject_selection("the game is over", pos)

        piece = self.state.board.get_piece(pos)
        if piece is None:
            return self._reject_selection("square is empty", pos)
        if piece.player != self.state.current_player:
            return self._reject_selection("piece belongs to the other player", pos)

        forced = self.state.forced_piece
        if forced is not None and pos != forced:
            return self._reject_selection(f"must continue jumping with the piece on {forced}", pos)

        self.selected = pos
        self.selected_moves = legal_moves(self.state, pos)
        return list(self.selected_moves)

    def deselect(self) -> None:
        """Clear the selection. The piece locked into a multi-jump stays selected."""
        if self.state.in_continuation:
            return
        self.selected = None
        self.selected_moves = []

    def apply_move(
        self,
        origin: Position,
        destination: Position,
        captures: Optional[Iterable[Position]] = None,
    ) -> Union[TurnResult, Rejection]:
        """
        Make a move in the game.

        The move must be one of legal_moves(origin). When captures is None
        the move is matched on destination alone.
        """
        origin = Board.check_position(origin)
        destination = Board.check_position(destination)

        if self.outcome.is_over:
            return self._reject_move("the game is over", origin)

        wanted = None if captures is None else tuple(tuple(c) for c in captures)
        matching = [
            m for m in legal_moves(self.state, origin)
            if m.destination == destination and (wanted is None or m.captures == wanted)
        ]
        if not matching:
            return self._reject_move(f"{origin} -> {destination} is not a legal move", origin)

        move = matching[0]
        mover = self.state.current_player
        self.state = self.state.apply_move(move)
        logger.debug("Player %d played %r", mover, move)

        continuation = self.state.in_continuation
        if continuation:
            self._select_forced_piece()
        else:
            self.selected = None
            self.selected_moves = []
            if self.state.last_move_promoted:
                logger.debug("Piece on %s promoted to king", move.destination)
            self.outcome = evaluate_outcome(self.state)
            logger.debug("Turn passes to Player %d", self.state.current_player)

        self._notify_state_changed()

        if self.outcome.is_over:
            logger.info("Game over: Player %d wins", self.outcome.winner)
            if self.on_game_over:
                self.on_game_over(self.outcome)

        return TurnResult(
            state=self.state,
            move=move,
            continuation=continuation,
            promoted=self.state.last_move_promoted,
            outcome=self.outcome,
        )

    def click(self, pos: Position) -> Union[TurnResult, List[Move], Rejection, None]:
        """
        Handle a square being chosen.

        A destination of the selected piece plays that move. Anything else
        clears the selection and, if the square holds a piece of the current
        player, selects it. Returns None when the click only cleared the
        selection.
        """
        pos = Board.check_position(pos)

        if self.selected is not None:
            for move in self.selected_moves:
                if move.destination == pos:
                    return self.apply_move(self.selected, pos, move.captures)

        if self.outcome.is_over:
            return self._reject_selection("the game is over", pos)

        self.deselect()
        if self.state.board.get_piece(pos) is None:
            return None
        return self.select_piece(pos)

    def evaluate_outcome(self) -> Outcome:
        """Check both players for a terminal condition."""
        self.outcome = evaluate_outcome(self.state)
        return self.outcome

    def _select_forced_piece(self) -> None:
        self.selected = self.state.forced_piece
        self.selected_moves = legal_moves(self.state, self.selected)
        logger.debug("Player %d continues jumping from %s", self.state.current_player, self.selected)

    def _reject_selection(self, reason: str, pos: Position) -> Rejection:
        logger.debug("Selection of %s rejected: %s", pos, reason)
        return Rejection.invalid_selection(reason, pos)

    def _reject_move(self, reason: str, pos: Position) -> Rejection:
        logger.debug("Move rejected: %s", reason)
        return Rejection.illegal_move(reason, pos)

    def _notify_state_changed(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_changed:
            self.on_state_changed(self.state)
