"""Breadth-first search with a depth ceiling."""

from __future__ import annotations

import logging
from collections import deque

from taquin.config import BFS_MAX_DEPTH
from taquin.engine.solver.base import ExpansionObserver, SearchNode, Solver
from taquin.models.board import Board
from taquin.models.solution import SolutionInfo

logger = logging.getLogger(__name__)


class BFSSolver(Solver):
    """Level-order search. The first goal dequeued uses the fewest moves.

    States are marked visited when they are enqueued, so no arrangement
    is ever queued twice. Nodes at ``max_depth`` are goal-tested but not
    expanded.
    """

    method = "BFS"

    def __init__(
        self,
        board: Board,
        goal: Board | None = None,
        *,
        max_depth: int = BFS_MAX_DEPTH,
        observer: ExpansionObserver | None = None,
    ) -> None:
        super().__init__(board, goal, observer=observer)
        self.max_depth = max_depth

    def solve(self, optimal_length: int | None = None) -> SolutionInfo | None:
        self._reset()
        stats = self.stats

        queue: deque[SearchNode] = deque([self._start])
        visited: set[tuple[int, ...]] = {self._start.tiles}
        capped = 0

        while queue:
            node = queue.popleft()
            stats.expanded += 1
            self._notify(node, visited, len(visited))

            if node.tiles == self._goal:
                return self._found(node, optimal_length)

            if node.depth >= self.max_depth:
                capped += 1
                continue

            for direction in node.legal_moves():
                child = node.child(direction)
                if child.tiles in visited:
                    continue
                visited.add(child.tiles)
                queue.append(child)
                stats.generated += 1
            stats.saw_frontier(len(queue))

        if capped:
            logger.debug("BFS: %d nodes left unexpanded at depth %d", capped, self.max_depth)
        self._exhausted()
        return None
