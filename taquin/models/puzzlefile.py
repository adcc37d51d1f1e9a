"""Puzzle persistence: initial layout, optional goal and known optimum as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from taquin.models.board import Board, InvalidBoardError


@dataclass
class PuzzleFile:
    initial: list[list[int]]
    goal: list[list[int]] | None = None
    optimal: int | None = None

    def to_board(self) -> Board:
        if self.goal is None:
            return Board.from_layout(self.initial)
        return Board.with_goal(self.initial, self.goal)

    @classmethod
    def from_board(cls, board: Board, optimal: int | None = None) -> PuzzleFile:
        return cls(initial=board.rows(), goal=board.goal_rows(), optimal=optimal)


def _layout(data: dict, key: str, path: Path) -> list[list[int]]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(row, list) for row in value):
        raise InvalidBoardError(f"{path}: {key!r} must be a list of rows.")
    return [list(row) for row in value]


def load_puzzle(path: Path) -> PuzzleFile:
    """Read a puzzle file. The layouts are validated by building the board."""
    data = json.loads(path.read_text())
    if not isinstance(data, dict) or "initial" not in data:
        raise InvalidBoardError(f"{path}: missing the 'initial' layout.")

    puzzle = PuzzleFile(initial=_layout(data, "initial", path))
    if data.get("goal") is not None:
        puzzle.goal = _layout(data, "goal", path)
    if data.get("optimal") is not None:
        optimal = data["optimal"]
        if isinstance(optimal, bool) or not isinstance(optimal, int) or optimal < 0:
            raise InvalidBoardError(
                f"{path}: 'optimal' must be a non-negative integer, got {optimal!r}."
            )
        puzzle.optimal = optimal

    puzzle.to_board()
    return puzzle


def save_puzzle(path: Path, puzzle: PuzzleFile) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    data: dict[str, object] = {"initial": puzzle.initial}
    if puzzle.goal is not None:
        data["goal"] = puzzle.goal
    if puzzle.optimal is not None:
        data["optimal"] = puzzle.optimal
    path.write_text(json.dumps(data, indent=2) + "\n")
