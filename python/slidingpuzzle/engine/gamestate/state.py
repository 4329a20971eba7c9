"""Win detection and the per-frame game state signal."""

from __future__ import annotations

from enum import StrEnum

from slidingpuzzle.models.board import Board


class GameState(StrEnum):
    UNSOLVED = "unsolved"
    SOLVED = "solved"
    INVALID_MOVE_ATTEMPTED = "invalid_move_attempted"


def is_solved(board: Board) -> bool:
    """Return True if *board* is in the goal arrangement."""
    return board.is_solved()


def evaluate(board: Board, move_rejected: bool = False) -> GameState:
    """Derive the state a driver should display for *board*.

    A solved board wins over a rejected move.
    """
    if board.is_solved():
        return GameState.SOLVED
    if move_rejected:
        return GameState.INVALID_MOVE_ATTEMPTED
    return GameState.UNSOLVED
