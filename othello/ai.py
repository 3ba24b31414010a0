from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import logging

from .board import Color, Position, index_to_coord, scan_forward
from .evaluator import Evaluator
from .rules import apply_move, apply_pass, generate_legal_moves, is_terminal, legal_moves_for

logger = logging.getLogger(__name__)

INF = 10**9


@dataclass
class SearchResult:
    best_move: Optional[int]
    score: int
    nodes: int
    scored_moves: Optional[List[Tuple[int, int]]] = None


class AIPlayer:
    """Fixed-depth minimax with alpha-beta pruning.

    Moves are tried in ascending index order and ties keep the earliest
    move, so a given (position, depth) always yields the same answer.
    """

    def __init__(self) -> None:
        self._nodes = 0

    def find_best_move(self, position: Position, depth: int) -> Optional[int]:
        """Best move for the side to move, or None when it has to pass."""
        return self.search(position, depth).best_move

    def search(self, position: Position, depth: int) -> SearchResult:
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self._nodes = 0
        legal = generate_legal_moves(position)
        if not legal:
            return SearchResult(best_move=None, score=Evaluator.evaluate(position, position.current_player), nodes=0)

        mover = position.current_player
        best_score = -INF
        best_move: Optional[int] = None
        scored_moves: List[Tuple[int, int]] = []

        for move in scan_forward(legal):
            child = apply_move(position, move)
            self._nodes += 1
            score = self.minimax(child, depth - 1, -INF, INF, maximizing=False, perspective=mover)
            scored_moves.append((move, score))
            if score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            "depth=%d best=%s score=%d nodes=%d",
            depth,
            index_to_coord(best_move) if best_move is not None else "PASS",
            best_score,
            self._nodes,
        )
        return SearchResult(best_move=best_move, score=best_score, nodes=self._nodes, scored_moves=scored_moves)

    def minimax(
        self,
        position: Position,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
        perspective: Color,
    ) -> int:
        legal = generate_legal_moves(position)
        other_legal = legal_moves_for(position, position.current_player.other)

        if depth == 0 or is_terminal(position, legal, other_legal):
            return Evaluator.evaluate(position, perspective)

        # Forced pass: does not consume a ply
        if not legal:
            return self.minimax(apply_pass(position), depth, alpha, beta, not maximizing, perspective)

        if maximizing:
            value = -INF
            for move in scan_forward(legal):
                self._nodes += 1
                score = self.minimax(apply_move(position, move), depth - 1, alpha, beta, False, perspective)
                value = max(value, score)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return value
        else:
            value = INF
            for move in scan_forward(legal):
                self._nodes += 1
                score = self.minimax(apply_move(position, move), depth - 1, alpha, beta, True, perspective)
                value = min(value, score)
                beta = min(beta, value)
                if beta <= alpha:
                    break
            return value


def find_best_move(position: Position, depth: int) -> Optional[int]:
    return AIPlayer().find_best_move(position, depth)
