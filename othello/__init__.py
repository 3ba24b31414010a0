"""Othello rule engine, evaluation, and AI search.

Modules:
- board: Coordinates, bitboard helpers, and the immutable Position snapshot
- rules: Legal moves, flips, move/pass application, and terminal detection
- evaluator: Phase-aware heuristic evaluation of positions
- ai: Fixed-depth minimax with alpha-beta pruning
- game: Human-vs-AI controller with undo/redo history
"""

from .board import BLACK, WHITE, Color, Position, coord_to_index, index_to_coord, NOT_FOUND, PASS
from .rules import generate_legal_moves, get_flips, apply_move, apply_pass, is_terminal, count
from .evaluator import Evaluator, evaluate
from .ai import AIPlayer, SearchResult, find_best_move
from .game import Game
from .errors import OthelloError, IllegalMoveError, InvalidCoordinateError

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "Position",
    "coord_to_index",
    "index_to_coord",
    "NOT_FOUND",
    "PASS",
    "generate_legal_moves",
    "get_flips",
    "apply_move",
    "apply_pass",
    "is_terminal",
    "count",
    "Evaluator",
    "evaluate",
    "AIPlayer",
    "SearchResult",
    "find_best_move",
    "Game",
    "OthelloError",
    "IllegalMoveError",
    "InvalidCoordinateError",
]
