"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import random
from enum import StrEnum

from slidingpuzzle.engine.gamegenerator import GameGenerator, ShuffleStrategy
from slidingpuzzle.engine.gamestate import GameState, evaluate
from slidingpuzzle.models.board import Board, Direction, Position


class MoveOutcome(StrEnum):
    APPLIED = "applied"
    REJECTED = "rejected"


class GamePlay:
    """A single game session.

    Sessions own their board and share no state, so any number of them can
    run side by side.
    """

    def __init__(
        self,
        size: int,
        rng: random.Random | None = None,
        strategy: ShuffleStrategy = ShuffleStrategy.REJECTION,
    ) -> None:
        self.size = size
        self.board = GameGenerator.generate(size, rng, strategy)
        self.last_outcome: MoveOutcome | None = None

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.board = board
        obj.last_outcome = None
        return obj

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> MoveOutcome:
        """Move the blank in *direction* and remember the outcome."""
        self.last_outcome = GamePlay.attempt_move(self.board, direction)
        return self.last_outcome

    @staticmethod
    def attempt_move(board: Board, direction: Direction) -> MoveOutcome:
        """Slide the blank one cell in *direction*.

        E.g. ``Direction.LEFT`` moves the tile left of the blank one cell
        to the right. Returns ``REJECTED`` and leaves *board* untouched if
        the blank would leave the grid.
        """
        assert board.blank_pos is not None, "board has not been populated"
        target = board.blank_pos.shifted(direction)

        if not (0 <= target.row < board.size and 0 <= target.col < board.size):
            return MoveOutcome.REJECTED

        GamePlay._swap(board, target)
        return MoveOutcome.APPLIED

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()

    @property
    def state(self) -> GameState:
        return evaluate(self.board, self.last_outcome == MoveOutcome.REJECTED)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: Position) -> None:
        board.swap(board.blank_pos, target)
        board.blank_pos = target
