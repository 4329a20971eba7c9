from slidingpuzzle.models.board import (
    MAX_SIZE,
    MIN_SIZE,
    Board,
    Direction,
    InvalidBoardError,
    InvalidSizeError,
    Position,
)

__all__ = [
    "MAX_SIZE",
    "MIN_SIZE",
    "Board",
    "Direction",
    "InvalidBoardError",
    "InvalidSizeError",
    "Position",
]
