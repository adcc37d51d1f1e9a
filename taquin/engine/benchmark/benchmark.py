"""Times solver runs so several methods can be compared on one board."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from taquin.engine.solver import Method, SearchStats, create_solver
from taquin.models.board import Board
from taquin.models.solution import SolutionInfo

logger = logging.getLogger(__name__)


@dataclass
class MethodRun:
    """Outcome of one solve: the result, wall time and search counters."""

    method: Method
    solution: SolutionInfo | None
    elapsed: float
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def solved(self) -> bool:
        return self.solution is not None


def run_method(
    method: Method,
    board: Board,
    goal: Board | None = None,
    optimal_length: int | None = None,
    **kwargs,
) -> MethodRun:
    solver = create_solver(method, board, goal, **kwargs)
    start = time.perf_counter()
    solution = solver.solve(optimal_length)
    elapsed = time.perf_counter() - start
    logger.debug("%s finished in %.4fs", solver.method, elapsed)
    return MethodRun(method=Method(method), solution=solution, elapsed=elapsed, stats=solver.stats)


def compare(
    board: Board,
    methods: Iterable[Method] = tuple(Method),
    goal: Board | None = None,
    optimal_length: int | None = None,
    max_depths: Mapping[Method, int] | None = None,
) -> list[MethodRun]:
    """Run each method on its own solver, returned in the order requested.

    With no *optimal_length*, A* (when requested) runs first and the
    length it finds grades everyone else. *max_depths* overrides the
    ceiling of the depth-bounded methods.
    """
    order = [Method(m) for m in methods]
    depths = max_depths or {}
    runs: dict[Method, MethodRun] = {}

    if optimal_length is None and Method.astar in order:
        astar = run_method(Method.astar, board, goal)
        runs[Method.astar] = astar
        if astar.solution is not None:
            optimal_length = len(astar.solution)
            astar.solution.optimal_length = optimal_length

    for method in order:
        if method not in runs:
            runs[method] = run_method(
                method, board, goal, optimal_length, max_depth=depths.get(method)
            )
    return [runs[m] for m in order]
