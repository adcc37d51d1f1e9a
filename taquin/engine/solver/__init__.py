from enum import StrEnum

from taquin.engine.solver.astar import AStarSolver
from taquin.engine.solver.base import (
    ExpansionEvent,
    ExpansionObserver,
    GradedMove,
    MoveGrade,
    SearchNode,
    SearchStats,
    Solver,
)
from taquin.engine.solver.bfs import BFSSolver
from taquin.engine.solver.dfs import DFSSolver
from taquin.engine.solver.solvability import is_solvable
from taquin.models.board import Board


class Method(StrEnum):
    bfs = "bfs"
    dfs = "dfs"
    astar = "astar"


SOLVERS: dict[Method, type[Solver]] = {
    Method.bfs: BFSSolver,
    Method.dfs: DFSSolver,
    Method.astar: AStarSolver,
}

# Only the uninformed strategies take a depth ceiling.
DEPTH_BOUNDED = {Method.bfs, Method.dfs}


def create_solver(method: Method, board: Board, goal: Board | None = None, **kwargs) -> Solver:
    if method not in DEPTH_BOUNDED or kwargs.get("max_depth") is None:
        kwargs.pop("max_depth", None)
    return SOLVERS[Method(method)](board, goal, **kwargs)


__all__ = [
    "AStarSolver",
    "BFSSolver",
    "DEPTH_BOUNDED",
    "DFSSolver",
    "ExpansionEvent",
    "ExpansionObserver",
    "GradedMove",
    "Method",
    "MoveGrade",
    "SOLVERS",
    "SearchNode",
    "SearchStats",
    "Solver",
    "create_solver",
    "is_solvable",
]
