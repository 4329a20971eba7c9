"""Solvability check based on inversion parity."""

from __future__ import annotations

import logging

from slidingpuzzle.models.board import BLANK, Board

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solvability checks — all methods are static."""

    @staticmethod
    def count_inversions(board: Board) -> int:
        """Count pairs of tiles that appear in reverse order, row-major.

        The blank takes no part in any pair.
        """
        flat = [v for v in board.flatten() if v != BLANK]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd sizes: solvable iff the inversion count is even.
        Even sizes: the blank's row counted 1-based from the bottom must be
        odd exactly when the inversion count is even.
        """
        inversions = Solver.count_inversions(board)
        inversions_even = inversions % 2 == 0

        if board.size % 2 == 1:
            solvable = inversions_even
        else:
            blank_row = board.locate_value(BLANK).row
            solvable = ((board.size - blank_row) % 2 == 1) == inversions_even

        logger.debug(
            "%d×%d board with %d inversions is %s",
            board.size,
            board.size,
            inversions,
            "solvable" if solvable else "unsolvable",
        )
        return solvable
