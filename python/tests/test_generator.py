"""Generator tests — every board handed out must be a solvable permutation."""

from __future__ import annotations

import logging
import random

import pytest

from slidingpuzzle.engine.gamegenerator import GameGenerator, ShuffleStrategy
from slidingpuzzle.engine.gamesolver import Solver
from slidingpuzzle.models.board import MAX_SIZE, MIN_SIZE, Board, Position

ALL_SIZES = list(range(MIN_SIZE, MAX_SIZE + 1))
GENERATOR_LOGGER = "slidingpuzzle.engine.gamegenerator.generator"


# -- scripted randomness ------------------------------------------------------


class _ScriptedCells:
    """Stands in for ``random.Random``; ``randrange`` replays fixed cells."""

    def __init__(self, cells: list[tuple[int, int]]) -> None:
        self._draws = iter([v for cell in cells for v in cell])

    def randrange(self, stop: int) -> int:
        value = next(self._draws)
        assert 0 <= value < stop
        return value


class _FixedShuffle:
    """Stands in for ``random.Random``; ``shuffle`` yields a fixed order."""

    def __init__(self, order: list[int]) -> None:
        self._order = order

    def shuffle(self, values: list[int]) -> None:
        values[:] = self._order


# -- populate -----------------------------------------------------------------


@pytest.mark.parametrize("strategy", list(ShuffleStrategy))
@pytest.mark.parametrize("size", ALL_SIZES)
def test_populate_yields_solvable_permutation(
    size: int, strategy: ShuffleStrategy
) -> None:
    board = Board.allocate(size)

    GameGenerator.populate(board, random.Random(size), strategy)

    assert sorted(board.flatten()) == list(range(size * size))
    assert board.blank_pos == board.locate_value(0)
    assert Solver.is_solvable(board)


def test_populate_is_reproducible_with_seed() -> None:
    first = Board.allocate(5)
    second = Board.allocate(5)

    GameGenerator.populate(first, random.Random(1234))
    GameGenerator.populate(second, random.Random(1234))

    assert first == second


def test_rejection_discards_unsolvable_permutation(caplog: pytest.LogCaptureFixture) -> None:
    unsolvable = [(2, 2), (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 1), (2, 0)]
    # Value 1 first lands on the blank's cell and is redrawn.
    goal = [(2, 2), (2, 2), (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1)]
    board = Board.allocate(3)

    with caplog.at_level(logging.DEBUG, logger=GENERATOR_LOGGER):
        GameGenerator.populate(board, _ScriptedCells(unsolvable + goal))

    assert board.tiles == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert board.blank_pos == Position(2, 2)
    assert "Discarding unsolvable permutation (attempt 1)" in caplog.text
    assert "Puzzle ready after 2 attempt(s)" in caplog.text


def test_parity_strategy_swaps_first_two_tiles() -> None:
    board = Board.allocate(3)

    GameGenerator.populate(
        board, _FixedShuffle([0, 1, 2, 3, 4, 5, 6, 8, 7]), ShuffleStrategy.PARITY
    )

    assert board.tiles == [[0, 2, 1], [3, 4, 5], [6, 8, 7]]
    assert board.blank_pos == Position(0, 0)
    assert Solver.is_solvable(board)


def test_parity_strategy_keeps_solvable_shuffle() -> None:
    board = Board.allocate(3)

    GameGenerator.populate(
        board, _FixedShuffle([8, 7, 6, 5, 4, 3, 2, 1, 0]), ShuffleStrategy.PARITY
    )

    assert board.tiles == [[8, 7, 6], [5, 4, 3], [2, 1, 0]]


def test_populate_refills_a_used_board() -> None:
    board = GameGenerator.solved(4)

    GameGenerator.populate(board, random.Random(99))

    assert board.is_consistent()
    assert Solver.is_solvable(board)


# -- generate / solved --------------------------------------------------------


@pytest.mark.parametrize("size", ALL_SIZES)
def test_solved_board_is_goal(size: int) -> None:
    board = GameGenerator.solved(size)

    assert board.flatten() == list(range(1, size * size)) + [0]
    assert board.blank_pos == Position(size - 1, size - 1)
    assert board.is_solved()


@pytest.mark.parametrize("strategy", list(ShuffleStrategy))
def test_generate_returns_unsolved_solvable_board(strategy: ShuffleStrategy) -> None:
    rng = random.Random(7)
    for _ in range(20):
        board = GameGenerator.generate(3, rng, strategy)
        assert not board.is_solved()
        assert Solver.is_solvable(board)
        assert board.is_consistent()
