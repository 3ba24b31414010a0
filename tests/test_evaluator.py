from __future__ import annotations

from hypothesis import given, settings

from othello.board import BB_ALL, BLACK, WHITE, Position, bb_square
from othello.evaluator import Evaluator, evaluate
from othello.rules import apply_move

from helpers import game_positions


def test_weight_table_is_symmetric():
    weights = Evaluator.POSITION_WEIGHTS
    assert len(weights) == 64
    for index, weight in enumerate(weights):
        row, col = divmod(index, 8)
        assert weights[row * 8 + (7 - col)] == weight
        assert weights[(7 - row) * 8 + col] == weight
        assert weights[col * 8 + row] == weight


def test_weight_table_landmarks():
    weights = Evaluator.POSITION_WEIGHTS
    for corner in (0, 7, 56, 63):
        assert weights[corner] == 200
    for diagonal in (9, 14, 49, 54):
        assert weights[diagonal] == -30
    for orthogonal in (1, 8, 6, 15, 48, 57, 55, 62):
        assert weights[orthogonal] == -20
    assert weights[27] == 1


def test_phase_weight():
    assert Evaluator.phase_weight(4) == 0.5
    assert Evaluator.phase_weight(20) == 0.5
    assert Evaluator.phase_weight(21) == 2.0
    assert Evaluator.phase_weight(40) == 2.0
    assert Evaluator.phase_weight(41) == 5.0


def test_start_position_is_balanced():
    p = Position.initial()
    assert evaluate(p, BLACK) == 0
    assert evaluate(p, WHITE) == 0


def test_known_value_after_opening_move():
    p = apply_move(Position.initial(), 20)
    # mobility 3 v 3, positional 5 v 1, disc diff 3 * 0.5 truncated to 1
    assert evaluate(p, BLACK) == 5
    assert evaluate(p, WHITE) == -5


@given(game_positions())
@settings(max_examples=100, deadline=None)
def test_perspective_symmetry(positions):
    for p in positions:
        assert evaluate(p, BLACK) == -evaluate(p, WHITE)


def test_endgame_disc_count_dominates():
    # Full board, white holds only H8's neighbour G8
    p = Position(black=BB_ALL & ~bb_square(62), white=bb_square(62))
    positional_black = sum(Evaluator.POSITION_WEIGHTS) - Evaluator.POSITION_WEIGHTS[62]
    positional_white = Evaluator.POSITION_WEIGHTS[62]
    assert evaluate(p, BLACK) == positional_black + 62 * 5 - positional_white


def test_evaluation_does_not_depend_on_side_to_move_for_mobility():
    p = apply_move(Position.initial(), 20)
    assert evaluate(p, BLACK) == evaluate(p.with_player(BLACK), BLACK)
