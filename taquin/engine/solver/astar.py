"""A* search guided by the Manhattan-distance heuristic."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from taquin.engine.solver.base import SearchNode, Solver
from taquin.models.board import Direction, manhattan, tile_distance
from taquin.models.solution import SolutionInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _CostNode(SearchNode):
    g: int = 0
    h: int = 0

    @property
    def f(self) -> int:
        return self.g + self.h

    def advance(self, direction: Direction, positions: Sequence[int]) -> _CostNode:
        tiles, blank = self.slide(direction)
        # Only the tile that slid into the old blank cell changes distance.
        moved = tiles[self.blank_index]
        h = (
            self.h
            - tile_distance(moved, blank, positions, self.size)
            + tile_distance(moved, self.blank_index, positions, self.size)
        )
        return _CostNode(
            tiles, blank, self.size, self.path + (direction,), self.g + 1, h
        )


class AStarSolver(Solver):
    """Best-first search on ``f = g + h``.

    Ties on ``f`` go to the deeper node, then to the older entry. The
    closed set is consulted at pop time, so a state may sit in the heap
    several times but is expanded at most once. Manhattan distance is
    consistent for unit-cost slides, so the first goal popped is optimal.
    There is no depth ceiling: an unsolvable board exhausts its whole
    reachable component before ``None`` comes back.
    """

    method = "A*"

    def solve(self, optimal_length: int | None = None) -> SolutionInfo | None:
        self._reset()
        stats = self.stats
        positions = self._positions

        start = _CostNode(
            self._start.tiles,
            self._start.blank_index,
            self.size,
            h=manhattan(self._start.tiles, positions, self.size),
        )
        counter = itertools.count()
        heap: list[tuple[int, int, int, _CostNode]] = [(start.f, -start.g, next(counter), start)]
        closed: set[tuple[int, ...]] = set()

        while heap:
            _, _, _, node = heapq.heappop(heap)

            if node.tiles == self._goal:
                stats.expanded += 1
                return self._found(node, optimal_length)

            if node.tiles in closed:
                continue
            closed.add(node.tiles)
            stats.expanded += 1
            self._notify(node, closed, len(closed))

            for direction in node.legal_moves():
                child = node.advance(direction, positions)
                if child.tiles in closed:
                    continue
                heapq.heappush(heap, (child.f, -child.g, next(counter), child))
                stats.generated += 1
            stats.saw_frontier(len(heap))

        self._exhausted()
        return None
