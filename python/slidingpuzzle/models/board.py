"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

MIN_SIZE = 3
MAX_SIZE = 9

BLANK = 0
UNSET = -1


class InvalidSizeError(ValueError):
    """Raised when a board size lies outside ``MIN_SIZE..MAX_SIZE``."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}."
        )
        self.size = size


class InvalidBoardError(ValueError):
    """Raised when explicit tile values are not a valid board."""


class Direction(StrEnum):
    """Direction the blank travels (the neighbouring tile slides the other way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    row: int
    col: int

    def shifted(self, direction: Direction) -> Position:
        dr, dc = direction.delta
        return Position(self.row + dr, self.col + dc)


def check_size(size: int) -> None:
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidSizeError(size)


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space and
    ``UNSET`` marks a cell that has not been populated yet. ``blank_pos``
    mirrors the location of the 0 and is ``None`` until the board is
    populated.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: Position | None = None

    # -- construction helpers -------------------------------------------------

    @classmethod
    def allocate(cls, size: int) -> Board:
        """Return an unpopulated ``size``×``size`` board."""
        check_size(size)
        tiles = [[UNSET] * size for _ in range(size)]
        return cls(size=size, tiles=tiles)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        check_size(size)
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        board = cls(size=size, tiles=tiles)
        board.blank_pos = board.locate_value(BLANK)
        return board

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows, e.g. ``[[1, 2, 3], ...]``."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidBoardError("Board rows must form a square grid.")
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    @property
    def area(self) -> int:
        return self.size * self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flatten(self) -> list[int]:
        """Return the tiles in row-major order."""
        return [v for row in self.tiles for v in row]

    def locate_value(self, value: int) -> Position:
        """Return the position holding *value*.

        Raises ``ValueError`` if no cell holds it.
        """
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return Position(r, c)
        raise ValueError(f"Value {value} is not on the board.")

    def is_populated(self) -> bool:
        return self.blank_pos is not None

    def is_consistent(self) -> bool:
        """Check the permutation invariant and that ``blank_pos`` tracks the 0."""
        if sorted(self.flatten()) != list(range(self.area)):
            return False
        if self.blank_pos is None:
            return False
        return self.tiles[self.blank_pos.row][self.blank_pos.col] == BLANK

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions.

        Tiles ``1..size²-1`` must read in order and the blank must sit in
        the bottom-right cell.
        """
        last = BLANK
        for r in range(self.size):
            for c in range(self.size):
                value = self.tiles[r][c]
                if value == BLANK:
                    if (r, c) != (self.size - 1, self.size - 1):
                        return False
                    continue
                if value < last:
                    return False
                last = value
        return True

    # -- mutation -------------------------------------------------------------

    def swap(self, a: Position, b: Position) -> None:
        """Exchange the values at *a* and *b*.

        Does not touch ``blank_pos``; callers moving the blank update it.
        """
        self.tiles[a.row][a.col], self.tiles[b.row][b.col] = (
            self.tiles[b.row][b.col],
            self.tiles[a.row][a.col],
        )

    def reset(self) -> None:
        """Mark every cell as unset."""
        for row in self.tiles:
            row[:] = [UNSET] * self.size
        self.blank_pos = None

    # -- conversion -----------------------------------------------------------

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    def to_dict(self) -> dict:
        return {"size": self.size, "tiles": [row[:] for row in self.tiles]}
