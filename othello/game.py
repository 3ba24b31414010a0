from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

import logging

from .ai import AIPlayer
from .board import (
    BLACK,
    NOT_FOUND,
    PASS,
    WHITE,
    Color,
    Position,
    coord_to_index,
    count,
    index_to_coord,
    squares,
)
from .errors import IllegalMoveError, InvalidCoordinateError
from .rules import apply_move, apply_pass, generate_legal_moves, is_terminal, legal_moves_for

logger = logging.getLogger(__name__)


class Game:
    """Human-versus-AI controller over a history of immutable positions.

    This class owns the snapshot history (undo/redo), enforces turn order
    and pass legality, and reports the game status for the web/API.
    """

    def __init__(self, human_color: Color = BLACK) -> None:
        self.human_color = human_color
        self.history: List[Position] = [Position.initial()]
        self._redo: List[Position] = []

    def reset(self, human_color: Optional[Color] = None) -> None:
        if human_color is not None:
            self.human_color = human_color
        self.history = [Position.initial()]
        self._redo = []

    @property
    def position(self) -> Position:
        return self.history[-1]

    @property
    def ai_color(self) -> Color:
        return self.human_color.other

    def is_human_turn(self) -> bool:
        return self.position.current_player is self.human_color

    def get_legal_moves(self) -> List[str]:
        return [index_to_coord(i) for i in squares(generate_legal_moves(self.position))]

    def push(self, move: Union[str, int]) -> int:
        """Play ``move`` (coordinate text or cell index) for the side to move."""
        index = coord_to_index(move) if isinstance(move, str) else move
        if index == NOT_FOUND:
            raise InvalidCoordinateError(f"Coordinate {move!r} is not valid. Use A1-H8 (e.g. D3).")
        legal = generate_legal_moves(self.position)
        if not (0 <= index < 64 and legal >> index & 1):
            raise IllegalMoveError(f"Move {index_to_coord(index)} is not legal here.")
        self._append(apply_move(self.position, index))
        logger.info("%s played %s", self.history[-2].current_player.value, index_to_coord(index))
        return index

    def pass_turn(self) -> None:
        if self.is_game_over():
            raise IllegalMoveError("Game is over")
        if generate_legal_moves(self.position):
            raise IllegalMoveError("Cannot pass: legal moves remain.")
        logger.info("%s passed", self.position.current_player.value)
        self._append(apply_pass(self.position))

    def _append(self, position: Position) -> None:
        self.history.append(position)
        self._redo.clear()

    def undo(self) -> bool:
        """Step back to the previous human turn. False when nothing to undo."""
        if len(self.history) <= 1:
            return False
        self._redo.append(self.history.pop())
        # Unwind the AI's reply as well so the human is to move again
        if self.position.current_player is self.ai_color and len(self.history) > 1:
            self._redo.append(self.history.pop())
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self.history.append(self._redo.pop())
        while self._redo and not self.is_human_turn():
            self.history.append(self._redo.pop())
        return True

    def can_undo(self) -> bool:
        return len(self.history) > 1

    def can_redo(self) -> bool:
        return bool(self._redo)

    def hint(self, ai: AIPlayer, depth: int) -> str:
        move = ai.find_best_move(self.position, depth)
        return PASS if move is None else index_to_coord(move)

    def is_game_over(self) -> bool:
        position = self.position
        return is_terminal(
            position,
            generate_legal_moves(position),
            legal_moves_for(position, position.current_player.other),
        )

    def scores(self) -> Tuple[int, int]:
        """Returns (black_count, white_count)."""
        return count(self.position.black), count(self.position.white)

    def get_result(self) -> Optional[str]:
        if not self.is_game_over():
            return None
        black, white = self.scores()
        if black > white:
            return BLACK.value
        if white > black:
            return WHITE.value
        return "draw"

    def snapshot(self) -> Dict[str, object]:
        position = self.position
        black, white = self.scores()
        last_move = position.last_move
        return {
            "board": position.to_rows(),
            "turn": position.current_player.value,
            "human_color": self.human_color.value,
            "legal_moves": self.get_legal_moves(),
            "scores": {"black": black, "white": white},
            "last_move": index_to_coord(last_move) if isinstance(last_move, int) else last_move,
            "pass_count": position.pass_count,
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "can_undo": self.can_undo(),
            "can_redo": self.can_redo(),
        }
