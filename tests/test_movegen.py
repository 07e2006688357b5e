"""
Tests for move generation.

Covers men and kings, capture priority, the mandatory-capture scan and the
side-effect-free mobility checks.
"""

import pytest

from checkers.board import Board
from checkers.types import Player, Move
from checkers.errors import OffBoardError
from checkers.game_state import GameState
from checkers.movegen import (
    legal_moves,
    piece_moves,
    scan_ray,
    StepKind,
    has_mandatory_capture,
    player_has_any_capture,
    player_has_any_move,
    movable_pieces,
)


def destinations(moves):
    return [m.destination for m in moves]


class TestManMoves:
    """Men step forward only but capture in every direction."""

    def test_initial_front_row_moves(self, initial_game_state):
        moves = legal_moves(initial_game_state, (2, 1))
        assert moves == [Move((2, 1), (3, 0)), Move((2, 1), (3, 2))]

    def test_blocked_back_row_has_no_moves(self, initial_game_state):
        assert legal_moves(initial_game_state, (0, 1)) == []

    def test_opponent_piece_and_empty_square_give_nothing(self, initial_game_state):
        assert legal_moves(initial_game_state, (5, 0)) == []
        assert legal_moves(initial_game_state, (3, 0)) == []

    @pytest.mark.parametrize("pos", [(8, 0), (-1, 2), (3, 9)])
    def test_off_board_origin_raises(self, initial_game_state, pos):
        with pytest.raises(OffBoardError):
            legal_moves(initial_game_state, pos)

    def test_player_two_moves_upward(self, make_state):
        state = make_state(p1_men=[(0, 1)], p2_men=[(4, 3)], turn=Player.TWO)
        assert destinations(legal_moves(state, (4, 3))) == [(3, 2), (3, 4)]

    @pytest.mark.parametrize("direction", [(-1, -1), (-1, 1), (1, -1), (1, 1)])
    def test_capture_in_every_direction(self, make_state, direction):
        dr, dc = direction
        enemy = (4 + dr, 3 + dc)
        landing = (4 + 2 * dr, 3 + 2 * dc)
        state = make_state(p1_men=[(4, 3)], p2_men=[enemy])

        assert legal_moves(state, (4, 3)) == [Move((4, 3), landing, (enemy,))]

    def test_no_capture_when_landing_occupied(self, make_state):
        state = make_state(p1_men=[(4, 3)], p2_men=[(5, 4), (6, 5)])
        assert state.must_capture is False
        assert legal_moves(state, (4, 3)) == [Move((4, 3), (5, 2))]

    def test_no_capture_of_own_piece(self, make_state):
        state = make_state(p1_men=[(4, 3), (5, 4)], p2_men=[(0, 7)])
        moves = legal_moves(state, (4, 3))
        assert all(not m.is_capture for m in moves)
        assert destinations(moves) == [(5, 2)]

    def test_captures_only_without_captures_is_empty(self, initial_game_state):
        assert legal_moves(initial_game_state, (2, 1), captures_only=True) == []


class TestCapturePriority:
    """Any available capture suppresses every simple move of that player."""

    def test_non_capturing_piece_gets_nothing(self, make_state):
        state = make_state(p1_men=[(2, 1), (2, 5)], p2_men=[(3, 2)])

        assert state.must_capture is True
        assert legal_moves(state, (2, 5)) == []
        assert legal_moves(state, (2, 1)) == [Move((2, 1), (4, 3), ((3, 2),))]

    def test_capture_beats_own_simple_moves(self, make_state):
        state = make_state(p1_men=[(2, 3)], p2_men=[(3, 4)])
        moves = legal_moves(state, (2, 3))
        assert moves == [Move((2, 3), (4, 5), ((3, 4),))]

    def test_piece_moves_ignores_turn(self, initial_game_state):
        moves = piece_moves(initial_game_state.board, (5, 0))
        assert destinations(moves) == [(4, 1)]


class TestKingMoves:
    """Kings scan whole diagonals."""

    def test_multi_landing_after_capture(self, make_state):
        state = make_state(p1_kings=[(1, 0)], p2_men=[(3, 2)])
        moves = legal_moves(state, (1, 0))

        assert destinations(moves) == [(4, 3), (5, 4), (6, 5), (7, 6)]
        assert all(m.captures == ((3, 2),) for m in moves)

    def test_landing_run_stops_at_next_piece(self, make_state):
        state = make_state(p1_kings=[(1, 0)], p2_men=[(3, 2), (6, 5)])
        moves = legal_moves(state, (1, 0))

        assert destinations(moves) == [(4, 3), (5, 4)]
        assert all(m.captures == ((3, 2),) for m in moves)

    def test_slides_along_open_diagonal(self, make_state):
        state = make_state(p1_kings=[(7, 0)], p2_men=[(0, 1)])
        moves = legal_moves(state, (7, 0))

        assert destinations(moves) == [(6, 1), (5, 2), (4, 3), (3, 4), (2, 5), (1, 6), (0, 7)]
        assert not any(m.is_capture for m in moves)

    def test_ally_blocks_ray(self, make_state):
        state = make_state(p1_kings=[(1, 0)], p1_men=[(2, 1)], p2_men=[(7, 6)])
        assert destinations(legal_moves(state, (1, 0))) == [(0, 1)]

    def test_two_opponents_in_a_row_block_ray(self, make_state):
        state = make_state(p1_kings=[(1, 0)], p2_men=[(3, 2), (4, 3)])
        assert destinations(legal_moves(state, (1, 0))) == [(0, 1), (2, 1)]

    def test_opponent_on_edge_cannot_be_jumped(self, make_state):
        state = make_state(p1_kings=[(2, 1)], p2_men=[(3, 0)])
        moves = legal_moves(state, (2, 1))
        assert (3, 0) not in destinations(moves)
        assert not any(m.is_capture for m in moves)

    def test_player_two_king_captures_backward(self, make_state):
        state = make_state(p1_men=[(4, 3)], p2_kings=[(2, 1)], turn=Player.TWO)
        moves = legal_moves(state, (2, 1))
        assert destinations(moves) == [(5, 4), (6, 5), (7, 6)]

    def test_scan_ray_steps(self, make_state):
        board = make_state(p1_kings=[(1, 0)], p2_men=[(3, 2), (6, 5)]).board
        king = board.get_piece((1, 0))
        steps = list(scan_ray(board, (1, 0), king, (1, 1)))

        assert [s.kind for s in steps] == [StepKind.MOVE, StepKind.CAPTURE, StepKind.CAPTURE]
        assert [s.pos for s in steps] == [(2, 1), (4, 3), (5, 4)]
        assert steps[1].captured == (3, 2)


class TestCaptureScan:
    """Mandatory-capture and mobility checks."""

    def test_initial_position_has_no_capture(self, initial_game_state):
        assert has_mandatory_capture(initial_game_state) is False

    def test_checks_other_player_without_mutation(self, make_state):
        state = make_state(p1_men=[(2, 1)], p2_men=[(3, 2), (4, 3)])

        assert player_has_any_capture(state.board, Player.ONE) is False
        assert player_has_any_capture(state.board, Player.TWO) is True
        assert has_mandatory_capture(state) is False
        assert state.current_player == Player.ONE
        assert state.must_capture is False

    def test_player_has_any_move(self, make_state):
        state = make_state(p1_men=[(0, 1), (2, 1), (3, 2)], p2_men=[(1, 0)])

        assert player_has_any_move(state.board, Player.ONE) is True
        assert player_has_any_move(state.board, Player.TWO) is False

    def test_player_without_pieces_cannot_move(self):
        assert player_has_any_move(Board(), Player.ONE) is False

    def test_movable_pieces_initial(self, initial_game_state):
        pieces = movable_pieces(initial_game_state)
        assert sorted(pieces) == [(2, 1), (2, 3), (2, 5), (2, 7)]
        assert sum(len(m) for m in pieces.values()) == 7

    def test_movable_pieces_respects_forced_piece(self, make_state):
        state = make_state(p1_men=[(2, 1), (0, 1)], p2_men=[(3, 2), (5, 4)])
        mid = state.apply_move(Move((2, 1), (4, 3), ((3, 2),)))
        assert list(movable_pieces(mid)) == [(4, 3)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
