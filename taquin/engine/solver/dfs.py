"""Depth-first search with a depth ceiling."""

from __future__ import annotations

import logging

from taquin.config import DFS_MAX_DEPTH
from taquin.engine.solver.base import ExpansionObserver, SearchNode, Solver
from taquin.models.board import Board
from taquin.models.solution import SolutionInfo

logger = logging.getLogger(__name__)


class DFSSolver(Solver):
    """Stack-based search, cheap on memory, no optimality guarantee.

    A state is marked visited when it is pushed, so a state reached
    first along a long path is never revisited along a shorter one.
    Returned paths are never longer than ``max_depth``.
    """

    method = "DFS"

    def __init__(
        self,
        board: Board,
        goal: Board | None = None,
        *,
        max_depth: int = DFS_MAX_DEPTH,
        observer: ExpansionObserver | None = None,
    ) -> None:
        super().__init__(board, goal, observer=observer)
        self.max_depth = max_depth

    def solve(self, optimal_length: int | None = None) -> SolutionInfo | None:
        self._reset()
        stats = self.stats

        stack: list[SearchNode] = [self._start]
        visited: set[tuple[int, ...]] = {self._start.tiles}
        pruned = 0

        while stack:
            node = stack.pop()
            stats.expanded += 1
            self._notify(node, visited, len(visited))

            if node.tiles == self._goal:
                return self._found(node, optimal_length)

            if node.depth >= self.max_depth:
                pruned += 1
                continue

            children: list[SearchNode] = []
            for direction in node.legal_moves():
                child = node.child(direction)
                if child.tiles not in visited:
                    visited.add(child.tiles)
                    children.append(child)

            # Deepest first on the stack so the shallowest pops next.
            children.sort(key=lambda c: c.depth, reverse=True)
            stack.extend(children)
            stats.generated += len(children)
            stats.saw_frontier(len(stack))

        logger.debug("DFS: pruned %d nodes at depth %d", pruned, self.max_depth)
        self._exhausted()
        return None
