"""Markdown report of a method comparison."""

from __future__ import annotations

from pathlib import Path

from taquin.engine.benchmark import MethodRun
from taquin.engine.playback import replay
from taquin.models.board import Board


def _grid(board: Board) -> list[str]:
    lines = ["| " + " | ".join(" " for _ in range(board.size)) + " |"]
    lines.append("|" + "---|" * board.size)
    for row in board.rows():
        lines.append("| " + " | ".join("_" if v == 0 else str(v) for v in row) + " |")
    return lines


def build_report(board: Board, runs: list[MethodRun]) -> str:
    lines: list[str] = ["# Sliding puzzle report", "", "## Initial state", ""]
    lines += _grid(board)

    for run in runs:
        lines += ["", f"## {run.method.value}", ""]
        if run.solution is None:
            lines.append("No solution found.")
            continue
        lines.append(run.solution.describe() + ".")
        for i, (direction, after) in enumerate(
            zip(run.solution.moves, replay(board, run.solution.moves)), 1
        ):
            lines += ["", f"### Step {i}: {direction.value}", ""]
            lines += _grid(after)

    lines += ["", "## Final stats", ""]
    lines.append("| Metric | " + " | ".join(r.method.value for r in runs) + " |")
    lines.append("|:--|" + ":--|" * len(runs))
    lines.append(
        "| Steps | "
        + " | ".join(str(len(r.solution)) if r.solution is not None else "Failed" for r in runs)
        + " |"
    )
    lines.append(
        "| Quality | "
        + " | ".join(r.solution.quality.value if r.solution is not None else "-" for r in runs)
        + " |"
    )
    lines.append("| Time | " + " | ".join(f"{r.elapsed:.4f}s" for r in runs) + " |")
    lines.append("| Expanded | " + " | ".join(str(r.stats.expanded) for r in runs) + " |")
    return "\n".join(lines) + "\n"


def write_report(path: Path, board: Board, runs: list[MethodRun]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_report(board, runs))
