class OthelloError(Exception):
    """Base exception for the Othello package."""


class IllegalMoveError(OthelloError):
    """Move or pass not legal in the current position."""


class InvalidCoordinateError(OthelloError):
    """Coordinate text that does not name a board cell."""
