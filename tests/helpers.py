from __future__ import annotations

from typing import List

from hypothesis import strategies as st

from othello.board import BB_ALL, BLACK, Position, bb_square, squares
from othello.evaluator import evaluate
from othello.rules import (
    apply_move,
    apply_pass,
    generate_legal_moves,
    is_terminal,
    legal_moves_for,
)


def black_must_pass() -> Position:
    """All white except a black disc on D4 and an empty E5, black to move.

    Black has nothing to capture; white playing E5 flips D4 along the diagonal.
    """
    black = bb_square(27)
    white = BB_ALL & ~bb_square(27) & ~bb_square(36)
    return Position(black=black, white=white, current_player=BLACK)


@st.composite
def game_positions(draw, max_plies: int = 60) -> List[Position]:
    """Positions of a game of drawn legal moves, start position first.

    Forced passes are played as they come up; the game stops at a terminal
    position or after a drawn number of plies.
    """
    plies = draw(st.integers(0, max_plies))
    position = Position.initial()
    positions = [position]
    for _ in range(plies):
        legal = generate_legal_moves(position)
        other = legal_moves_for(position, position.current_player.other)
        if is_terminal(position, legal, other):
            break
        if legal:
            position = apply_move(position, draw(st.sampled_from(squares(legal))))
        else:
            position = apply_pass(position)
        positions.append(position)
    return positions


def final_position(max_plies: int = 60):
    return game_positions(max_plies=max_plies).map(lambda positions: positions[-1])


def ray_walk_moves(position: Position) -> List[int]:
    """Legal moves found by walking rows and columns cell by cell."""
    own = position.own
    opp = position.opponent
    moves = []
    for index in range(64):
        if (own | opp) >> index & 1:
            continue
        row, col = divmod(index, 8)
        for dr, dc in ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)):
            r, c = row + dr, col + dc
            seen = 0
            while 0 <= r < 8 and 0 <= c < 8 and opp >> (r * 8 + c) & 1:
                seen += 1
                r, c = r + dr, c + dc
            if seen and 0 <= r < 8 and 0 <= c < 8 and own >> (r * 8 + c) & 1:
                moves.append(index)
                break
    return moves


def plain_minimax(position: Position, depth: int, maximizing: bool, perspective) -> int:
    """Minimax without pruning over the same tree the AI searches."""
    legal = generate_legal_moves(position)
    other = legal_moves_for(position, position.current_player.other)
    if depth == 0 or is_terminal(position, legal, other):
        return evaluate(position, perspective)
    if not legal:
        return plain_minimax(apply_pass(position), depth, not maximizing, perspective)
    scores = [
        plain_minimax(apply_move(position, move), depth - 1, not maximizing, perspective)
        for move in squares(legal)
    ]
    return max(scores) if maximizing else min(scores)
