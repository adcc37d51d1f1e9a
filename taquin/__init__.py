"""Sliding-tile puzzle solver: BFS, depth-bounded DFS and A*."""

from taquin.engine.solver import (
    AStarSolver,
    BFSSolver,
    DFSSolver,
    Method,
    Solver,
    create_solver,
    is_solvable,
)
from taquin.models import Board, Direction, MoveQuality, SolutionInfo

__version__ = "0.1.0"

__all__ = [
    "AStarSolver",
    "BFSSolver",
    "Board",
    "DFSSolver",
    "Direction",
    "Method",
    "MoveQuality",
    "SolutionInfo",
    "Solver",
    "create_solver",
    "is_solvable",
]
