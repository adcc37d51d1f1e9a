"""Pieces shared by every search strategy: nodes, stats, tracing hooks."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Container
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from taquin.models.board import (
    Board,
    Direction,
    InvalidBoardError,
    goal_positions,
    legal_moves,
    manhattan,
    target_index,
)
from taquin.models.solution import SolutionInfo

logger = logging.getLogger(__name__)


# -- search nodes -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SearchNode:
    """Immutable snapshot of a board plus the moves that led to it."""

    tiles: tuple[int, ...]
    blank_index: int
    size: int
    path: tuple[Direction, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.path)

    def legal_moves(self) -> list[Direction]:
        return legal_moves(self.blank_index, self.size)

    def slide(self, direction: Direction) -> tuple[tuple[int, ...], int]:
        """Tiles and blank index after sliding the blank in *direction*."""
        target = target_index(self.blank_index, self.size, direction)
        if target is None:
            raise ValueError(f"{direction.value!r} is not legal from {self.blank_index}")
        tiles = list(self.tiles)
        tiles[self.blank_index], tiles[target] = tiles[target], 0
        return tuple(tiles), target

    def child(self, direction: Direction) -> SearchNode:
        tiles, blank = self.slide(direction)
        return SearchNode(tiles, blank, self.size, self.path + (direction,))


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0

    def saw_frontier(self, length: int) -> None:
        if length > self.max_frontier:
            self.max_frontier = length


# -- tracing ------------------------------------------------------------------


class MoveGrade(StrEnum):
    BEST = "best"
    MID = "mid"
    BAD = "bad"


@dataclass(frozen=True)
class GradedMove:
    direction: Direction
    grade: MoveGrade
    reason: str


@dataclass(frozen=True)
class ExpansionEvent:
    """What a solver is looking at when it expands a node."""

    method: str
    tiles: tuple[int, ...]
    goal: tuple[int, ...]
    size: int
    depth: int
    visited: int
    moves: tuple[GradedMove, ...]


ExpansionObserver = Callable[[ExpansionEvent], None]


# -- solver contract ----------------------------------------------------------


class Solver(ABC):
    """Common construction and bookkeeping for the search strategies.

    A solver copies the board's tiles when it is built, so the board
    itself can be changed or discarded afterwards. With no *goal* the
    board's own goal is the target.
    """

    method: ClassVar[str]

    def __init__(
        self,
        board: Board,
        goal: Board | None = None,
        *,
        observer: ExpansionObserver | None = None,
    ) -> None:
        if goal is None:
            goal_tiles = board.goal_tiles
        elif goal.size != board.size:
            raise InvalidBoardError(
                f"Goal is {goal.size}×{goal.size} but the board is "
                f"{board.size}×{board.size}."
            )
        else:
            goal_tiles = goal.tiles

        self.size = board.size
        self.observer = observer
        self.stats = SearchStats()
        self._start = SearchNode(tuple(board.tiles), board.blank_index, board.size)
        self._goal = tuple(goal_tiles)
        self._positions = goal_positions(self._goal)

    @classmethod
    def with_goal(cls, board: Board, goal: Board, **kwargs) -> Solver:
        """Build a solver that targets *goal* instead of the board's own goal."""
        return cls(board, goal, **kwargs)

    @property
    def goal_tiles(self) -> tuple[int, ...]:
        return self._goal

    @abstractmethod
    def solve(self, optimal_length: int | None = None) -> SolutionInfo | None:
        """Search for the goal.

        Returns the moves wrapped in a :class:`SolutionInfo`, or ``None``
        when the strategy gives up without reaching the goal.
        """

    # -- helpers for subclasses -----------------------------------------------

    def _reset(self) -> None:
        self.stats = SearchStats()
        logger.debug(
            "%s: searching %d×%d board %s", self.method, self.size, self.size,
            self._start.tiles,
        )

    def _found(self, node: SearchNode, optimal_length: int | None) -> SolutionInfo:
        logger.info(
            "%s: solved in %d moves after expanding %d nodes",
            self.method, node.depth, self.stats.expanded,
        )
        return SolutionInfo(moves=list(node.path), optimal_length=optimal_length)

    def _exhausted(self) -> None:
        logger.info(
            "%s: no solution found after expanding %d nodes",
            self.method, self.stats.expanded,
        )

    def _notify(self, node: SearchNode, seen: Container[tuple[int, ...]], visited: int) -> None:
        """Grade every legal move from *node* and hand the result to the observer."""
        if self.observer is None:
            return

        current = manhattan(node.tiles, self._positions, self.size)
        graded: list[GradedMove] = []
        for direction in node.legal_moves():
            tiles, _ = node.slide(direction)
            if tiles in seen:
                graded.append(GradedMove(direction, MoveGrade.BAD, "already visited"))
                continue
            new = manhattan(tiles, self._positions, self.size)
            if new < current:
                grade, reason = MoveGrade.BEST, f"manhattan distance {current} -> {new}"
            elif new == current:
                grade, reason = MoveGrade.MID, f"manhattan distance unchanged at {current}"
            else:
                grade, reason = MoveGrade.BAD, f"manhattan distance {current} -> {new}"
            graded.append(GradedMove(direction, grade, reason))

        self.observer(
            ExpansionEvent(
                method=self.method,
                tiles=node.tiles,
                goal=self._goal,
                size=self.size,
                depth=node.depth,
                visited=visited,
                moves=tuple(graded),
            )
        )
