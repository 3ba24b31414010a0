from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from .board import (
    BB_ALL,
    BB_EMPTY,
    BB_FILE_A,
    BB_FILE_H,
    PASS,
    Bitboard,
    Color,
    Position,
    bb_square,
    count,
    index_to_coord,
)
from .errors import IllegalMoveError

__all__ = [
    "DIRECTIONS",
    "generate_legal_moves",
    "legal_moves_for",
    "get_flips",
    "apply_move",
    "apply_pass",
    "is_terminal",
    "count",
]

NOT_A: Bitboard = BB_ALL & ~BB_FILE_A
NOT_H: Bitboard = BB_ALL & ~BB_FILE_H

# (index delta, mask applied after the shift). Steps that move one file to
# the east may not land on file A and steps that move west may not land on
# file H, otherwise a ray would wrap into the neighbouring row.
DIRECTIONS: Tuple[Tuple[int, Bitboard], ...] = (
    (-9, NOT_H),  # south-west
    (-8, BB_ALL),  # south
    (-7, NOT_A),  # south-east
    (-1, NOT_H),  # west
    (1, NOT_A),  # east
    (7, NOT_H),  # north-west
    (8, BB_ALL),  # north
    (9, NOT_A),  # north-east
)


def _shift(bb: Bitboard, delta: int, mask: Bitboard) -> Bitboard:
    if delta > 0:
        return (bb << delta) & mask
    return (bb >> -delta) & mask


def _flips_in_direction(move_bb: Bitboard, own: Bitboard, opp: Bitboard, delta: int, mask: Bitboard) -> Bitboard:
    """Opponent discs bracketed from ``move_bb`` along one ray, or 0."""
    flipped = BB_EMPTY
    current = _shift(move_bb, delta, mask)
    while current & opp:
        flipped |= current
        current = _shift(current, delta, mask)
    if current & own:
        return flipped
    return BB_EMPTY


def _moves_mask(own: Bitboard, opp: Bitboard) -> Bitboard:
    # Flood each direction through opponent runs from our discs; an empty
    # cell at the end of a run is a capture in the reverse direction.
    empty = ~(own | opp) & BB_ALL
    moves = BB_EMPTY
    for delta, mask in DIRECTIONS:
        run = _shift(own, delta, mask) & opp
        for _ in range(5):
            run |= _shift(run, delta, mask) & opp
        moves |= _shift(run, delta, mask) & empty
    return moves


def generate_legal_moves(position: Position) -> Bitboard:
    """Bitmask of every cell where the side to move captures at least one disc."""
    return _moves_mask(position.own, position.opponent)


def legal_moves_for(position: Position, color: Color) -> Bitboard:
    """Legal moves ``color`` would have if it were to move, occupancy unchanged."""
    return generate_legal_moves(position.with_player(color))


def get_flips(position: Position, move: int) -> Bitboard:
    """Union over all eight rays of the discs captured by playing ``move``.

    Does not check that ``move`` is empty; callers pass a legal move.
    """
    move_bb = bb_square(move)
    own = position.own
    opp = position.opponent
    flips = BB_EMPTY
    for delta, mask in DIRECTIONS:
        flips |= _flips_in_direction(move_bb, own, opp, delta, mask)
    return flips


def apply_move(position: Position, move: int) -> Position:
    """
    Return a NEW Position with ``move`` played by the side to move.
    Raises IllegalMoveError if the move is not in the legal set.
    """
    if not 0 <= move < 64 or not generate_legal_moves(position) & bb_square(move):
        raise IllegalMoveError(
            f"Illegal move for {position.current_player.value} at {index_to_coord(move)}"
        )

    flips = get_flips(position, move)
    gained = flips | bb_square(move)
    if position.current_player is Color.BLACK:
        black = position.black | gained
        white = position.white & ~flips
    else:
        white = position.white | gained
        black = position.black & ~flips

    return Position(
        black=black,
        white=white,
        current_player=position.current_player.other,
        pass_count=0,
        last_move=move,
    )


def apply_pass(position: Position) -> Position:
    """Hand the turn over without placing a disc.

    Legality of the pass is the caller's responsibility.
    """
    return replace(
        position,
        current_player=position.current_player.other,
        pass_count=position.pass_count + 1,
        last_move=PASS,
    )


def is_terminal(position: Position, legal_a: Bitboard, legal_b: Bitboard) -> bool:
    """
    Game over when the board is full, two passes happened in a row, either
    colour has no discs left, or neither supplied legal-move set has a move.
    """
    total = position.total_discs()
    if total == 64:
        return True
    if position.pass_count >= 2:
        return True
    if position.black == BB_EMPTY or position.white == BB_EMPTY:
        return True
    return legal_a == BB_EMPTY and legal_b == BB_EMPTY
