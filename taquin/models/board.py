"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Which way the *blank* slides."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class InvalidBoardError(ValueError):
    """Raised when a layout is not a square permutation of ``0..N²-1``."""


class InvalidMoveError(ValueError):
    """Raised when a direction is not legal from the current blank cell."""

    def __init__(self, direction: Direction, blank_index: int, size: int) -> None:
        row, col = divmod(blank_index, size)
        super().__init__(
            f"Invalid move {direction.value!r}: blank is at row {row}, "
            f"col {col} of a {size}×{size} board."
        )
        self.direction = direction


# -- flat-array helpers shared with the search nodes ------------------------


def legal_moves(blank_index: int, size: int) -> list[Direction]:
    """Legal directions from *blank_index*, always in Up/Down/Left/Right order."""
    row, col = divmod(blank_index, size)
    moves: list[Direction] = []
    if row > 0:
        moves.append(Direction.UP)
    if row < size - 1:
        moves.append(Direction.DOWN)
    if col > 0:
        moves.append(Direction.LEFT)
    if col < size - 1:
        moves.append(Direction.RIGHT)
    return moves


def target_index(blank_index: int, size: int, direction: Direction) -> int | None:
    """Cell the blank lands on after *direction*, or ``None`` if off the grid."""
    row, col = divmod(blank_index, size)
    if direction is Direction.UP:
        return blank_index - size if row > 0 else None
    if direction is Direction.DOWN:
        return blank_index + size if row < size - 1 else None
    if direction is Direction.LEFT:
        return blank_index - 1 if col > 0 else None
    return blank_index + 1 if col < size - 1 else None


def goal_positions(goal: Sequence[int]) -> list[int]:
    """Map each tile value to its index in *goal*."""
    positions = [0] * len(goal)
    for i, value in enumerate(goal):
        positions[value] = i
    return positions


def tile_distance(value: int, index: int, positions: Sequence[int], size: int) -> int:
    """Grid distance between *index* and the goal cell of *value*."""
    row, col = divmod(index, size)
    goal_row, goal_col = divmod(positions[value], size)
    return abs(row - goal_row) + abs(col - goal_col)


def manhattan(tiles: Sequence[int], positions: Sequence[int], size: int) -> int:
    """Sum of grid distances of every non-blank tile to its goal cell."""
    return sum(
        tile_distance(value, i, positions, size)
        for i, value in enumerate(tiles)
        if value != 0
    )


def default_goal(size: int) -> list[int]:
    """``1, 2, …, N²-1, 0``: tiles ascending, blank bottom-right."""
    return [*range(1, size * size), 0]


def _flatten(layout: Sequence[Sequence[int]], what: str) -> tuple[int, list[int]]:
    size = len(layout)
    if size == 0:
        raise InvalidBoardError(f"The {what} layout is empty.")
    for r, row in enumerate(layout):
        if len(row) != size:
            raise InvalidBoardError(
                f"The {what} layout is not square: row {r} has {len(row)} "
                f"tiles, expected {size}."
            )
    return size, [v for row in layout for v in row]


def _check_permutation(size: int, flat: Sequence[int], what: str) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidBoardError(
            f"The {what} size must be a positive integer, got {size!r}."
        )
    expected = size * size
    if len(flat) != expected:
        raise InvalidBoardError(
            f"Expected {expected} tiles for a {size}×{size} {what}, "
            f"got {len(flat)}."
        )
    seen: set[int] = set()
    for v in flat:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidBoardError(f"Tile {v!r} in the {what} is not an integer.")
        if not 0 <= v < expected:
            raise InvalidBoardError(
                f"Tile {v} is out of range for a {size}×{size} {what} "
                f"(allowed 0..{expected - 1})."
            )
        if v in seen:
            raise InvalidBoardError(f"Tile {v} appears more than once in the {what}.")
        seen.add(v)


# -- board --------------------------------------------------------------------


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    blank space. The goal arrangement travels with the board and
    defaults to ascending tiles with the blank last.
    """

    size: int
    tiles: list[int]
    blank_index: int = -1
    goal_tiles: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_permutation(self.size, self.tiles, "board")
        if not self.goal_tiles:
            self.goal_tiles = default_goal(self.size)
        else:
            _check_permutation(self.size, self.goal_tiles, "goal")
        blank = self.tiles.index(0)
        if self.blank_index not in (-1, blank):
            raise InvalidBoardError(
                f"blank_index {self.blank_index} does not match the blank "
                f"at index {blank}."
            )
        self.blank_index = blank

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_layout(cls, layout: Sequence[Sequence[int]]) -> Board:
        """Create a board from a row-major 2-D layout with the default goal.

        Example::

            Board.from_layout([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
        """
        size, flat = _flatten(layout, "board")
        return cls(size=size, tiles=flat)

    @classmethod
    def with_goal(
        cls,
        layout: Sequence[Sequence[int]],
        goal_layout: Sequence[Sequence[int]],
    ) -> Board:
        """Create a board whose goal is *goal_layout* instead of the default."""
        size, flat = _flatten(layout, "board")
        goal_size, goal = _flatten(goal_layout, "goal")
        if goal_size != size:
            raise InvalidBoardError(
                f"Goal is {goal_size}×{goal_size} but the board is {size}×{size}."
            )
        return cls(size=size, tiles=flat, goal_tiles=goal)

    @classmethod
    def from_flat(
        cls, size: int, flat: Sequence[int], goal: Sequence[int] | None = None
    ) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(
            size=size,
            tiles=list(flat),
            goal_tiles=list(goal) if goal is not None else [],
        )

    # -- queries --------------------------------------------------------------

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def goal_rows(self) -> list[list[int]]:
        n = self.size
        return [self.goal_tiles[r * n : (r + 1) * n] for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_goal(self) -> bool:
        """Check if the tiles match the goal arrangement exactly."""
        return self.tiles == self.goal_tiles

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        i = row * self.size + col
        return self.tiles[i] == self.goal_tiles[i]

    def possible_moves(self) -> list[Direction]:
        return legal_moves(self.blank_index, self.size)

    def manhattan_distance(self) -> int:
        """Admissible lower bound on the number of moves left."""
        return manhattan(self.tiles, goal_positions(self.goal_tiles), self.size)

    # -- mutation -------------------------------------------------------------

    def make_move(self, direction: Direction) -> None:
        """Slide the blank one cell in *direction*.

        Raises :class:`InvalidMoveError` when the blank is already on the
        matching edge.
        """
        target = target_index(self.blank_index, self.size, direction)
        if target is None:
            raise InvalidMoveError(direction, self.blank_index, self.size)
        t = self.tiles
        t[self.blank_index], t[target] = t[target], t[self.blank_index]
        self.blank_index = target

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=self.tiles[:],
            blank_index=self.blank_index,
            goal_tiles=self.goal_tiles[:],
        )

    # -- display --------------------------------------------------------------

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        bar = "─" * (width + 2)
        top = "┌" + "┬".join([bar] * self.size) + "┐"
        mid = "├" + "┼".join([bar] * self.size) + "┤"
        bottom = "└" + "┴".join([bar] * self.size) + "┘"

        lines = [top]
        for r, row in enumerate(self.rows()):
            cells = [f" {'_' if v == 0 else v:>{width}} " for v in row]
            lines.append("│" + "│".join(cells) + "│")
            lines.append(mid if r < self.size - 1 else bottom)
        return "\n".join(lines)
