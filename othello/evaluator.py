from __future__ import annotations

from typing import List, Tuple

from .board import Color, Position, count, scan_forward
from .rules import legal_moves_for


class Evaluator:
    """Static evaluation for Othello positions.

    Scores are signed from the perspective colour: positive favours it.
    Each side's term adds mobility, positional weight and (for the perspective
    only) the phase-scaled disc differential.
    """

    MOBILITY_WEIGHT = 5

    # Indexed by cell 0..63, row 0 = rank 1. Corners 200, their orthogonal
    # neighbours -20 and their diagonal neighbours -30.
    POSITION_WEIGHTS: List[int] = [
        200, -20, 10, 5, 5, 10, -20, 200,
        -20, -30, -5, -5, -5, -5, -30, -20,
        10, -5, 2, 2, 2, 2, -5, 10,
        5, -5, 2, 1, 1, 2, -5, 5,
        5, -5, 2, 1, 1, 2, -5, 5,
        10, -5, 2, 2, 2, 2, -5, 10,
        -20, -30, -5, -5, -5, -5, -30, -20,
        200, -20, 10, 5, 5, 10, -20, 200,
    ]

    # (max total discs, multiplier) checked in order; endgame otherwise
    PHASE_WEIGHTS: Tuple[Tuple[int, float], ...] = ((20, 0.5), (40, 2.0))
    ENDGAME_WEIGHT = 5.0

    @classmethod
    def evaluate(cls, position: Position, perspective: Color) -> int:
        own_discs = position.discs(perspective)
        opp_discs = position.discs(perspective.other)

        own_score = cls.MOBILITY_WEIGHT * count(legal_moves_for(position, perspective))
        opp_score = cls.MOBILITY_WEIGHT * count(legal_moves_for(position, perspective.other))

        own_score += cls.positional(own_discs)
        opp_score += cls.positional(opp_discs)

        disc_diff = count(own_discs) - count(opp_discs)
        own_score += int(disc_diff * cls.phase_weight(position.total_discs()))

        return own_score - opp_score

    @classmethod
    def positional(cls, discs: int) -> int:
        return sum(cls.POSITION_WEIGHTS[square] for square in scan_forward(discs))

    @classmethod
    def phase_weight(cls, total_discs: int) -> float:
        for limit, weight in cls.PHASE_WEIGHTS:
            if total_discs <= limit:
                return weight
        return cls.ENDGAME_WEIGHT


def evaluate(position: Position, perspective: Color) -> int:
    return Evaluator.evaluate(position, perspective)
