"""Sliding puzzle core: board model, solvable shuffles, moves and win detection.

A driver only needs the functions exported here::

    board = allocate(4)
    populate(board)
    attempt_move(board, Direction.LEFT)
    is_solved(board)
"""

from slidingpuzzle.engine.gamegenerator import GameGenerator, ShuffleStrategy
from slidingpuzzle.engine.gameplay import GamePlay, MoveOutcome
from slidingpuzzle.engine.gamesolver import Solver
from slidingpuzzle.engine.gamestate import GameState, is_solved
from slidingpuzzle.models import (
    MAX_SIZE,
    MIN_SIZE,
    Board,
    Direction,
    InvalidBoardError,
    InvalidSizeError,
    Position,
)

allocate = Board.allocate
populate = GameGenerator.populate
attempt_move = GamePlay.attempt_move
is_solvable = Solver.is_solvable

__all__ = [
    "MAX_SIZE",
    "MIN_SIZE",
    "Board",
    "Direction",
    "GamePlay",
    "GameGenerator",
    "GameState",
    "InvalidBoardError",
    "InvalidSizeError",
    "MoveOutcome",
    "Position",
    "ShuffleStrategy",
    "Solver",
    "allocate",
    "attempt_move",
    "is_solvable",
    "is_solved",
    "populate",
]
