"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from slidingpuzzle.engine.gamesolver import Solver
from slidingpuzzle.models.board import BLANK, UNSET, Board, Position

logger = logging.getLogger(__name__)


class ShuffleStrategy(StrEnum):
    REJECTION = "rejection"
    PARITY = "parity"


class GameGenerator:
    """Creates uniformly random, solvable puzzles."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        area = size * size
        return Board.from_flat(size, list(range(1, area)) + [BLANK])

    @staticmethod
    def populate(
        board: Board,
        rng: random.Random | None = None,
        strategy: ShuffleStrategy = ShuffleStrategy.REJECTION,
    ) -> None:
        """Fill *board* in-place with a random solvable permutation.

        ``REJECTION`` scatters the values onto random free cells and starts
        over whenever the result is unsolvable. ``PARITY`` shuffles once and
        swaps two tiles if needed, which flips the inversion parity.
        """
        rng = rng or random.Random()
        logger.info("Building %d×%d puzzle (%s)", board.size, board.size, strategy)

        if strategy == ShuffleStrategy.PARITY:
            GameGenerator._shuffle_with_parity_fix(board, rng)
            attempts = 1
        else:
            attempts = GameGenerator._shuffle_until_solvable(board, rng)

        assert board.is_consistent() and Solver.is_solvable(board)
        logger.info("Puzzle ready after %d attempt(s)", attempts)

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        strategy: ShuffleStrategy = ShuffleStrategy.REJECTION,
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        rng = rng or random.Random()
        board = Board.allocate(size)
        GameGenerator.populate(board, rng, strategy)

        # Ensure the board is not already solved
        while board.is_solved():
            GameGenerator.populate(board, rng, strategy)

        return board

    # -- strategies -----------------------------------------------------------

    @staticmethod
    def _shuffle_until_solvable(board: Board, rng: random.Random) -> int:
        attempts = 0
        while True:
            attempts += 1
            GameGenerator._scatter(board, rng)
            if Solver.is_solvable(board):
                return attempts
            logger.debug("Discarding unsolvable permutation (attempt %d)", attempts)

    @staticmethod
    def _scatter(board: Board, rng: random.Random) -> None:
        """Place ``0..size²-1`` on uniformly random unoccupied cells."""
        board.reset()
        for value in range(board.area):
            while True:
                r = rng.randrange(board.size)
                c = rng.randrange(board.size)
                if board.tiles[r][c] == UNSET:
                    break
            board.tiles[r][c] = value
        board.blank_pos = board.locate_value(BLANK)

    @staticmethod
    def _shuffle_with_parity_fix(board: Board, rng: random.Random) -> None:
        values = list(range(board.area))
        rng.shuffle(values)
        for r in range(board.size):
            board.tiles[r][:] = values[r * board.size : (r + 1) * board.size]
        board.blank_pos = board.locate_value(BLANK)

        if not Solver.is_solvable(board):
            logger.debug("Swapping two tiles to fix permutation parity")
            a, b = GameGenerator._first_two_tiles(board)
            board.swap(a, b)

    @staticmethod
    def _first_two_tiles(board: Board) -> tuple[Position, Position]:
        tiles = [
            Position(r, c)
            for r in range(board.size)
            for c in range(board.size)
            if board.tiles[r][c] != BLANK
        ]
        return tiles[0], tiles[1]
