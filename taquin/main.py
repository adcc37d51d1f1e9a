#!/usr/bin/env python3
"""Taquin puzzle solver.

Usage::

    taquin solve                                  # A* on the demo puzzle
    taquin solve -b "1,2,3/4,0,6/7,5,8" -m bfs    # BFS on a given board
    taquin solve -f puzzle.json --trace           # print every expansion
    taquin compare --report results.md            # all three methods
    taquin scramble -s 3 --moves 20 -o p.json     # write a random puzzle
    taquin check -b "1,2/0,3"                     # heuristic + solvability
"""

import re
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from taquin.config import BFS_MAX_DEPTH, DEMO_LAYOUT, DFS_MAX_DEPTH
from taquin.engine.benchmark import compare as compare_methods
from taquin.engine.generator import GameGenerator
from taquin.engine.solver import Method, create_solver, is_solvable
from taquin.frontend.cli.rich.app import (
    TraceObserver,
    render_comparison,
    render_solution,
    show_board,
)
from taquin.frontend.report import write_report
from taquin.log import setup_logging
from taquin.models.board import Board, InvalidBoardError
from taquin.models.puzzlefile import PuzzleFile, load_puzzle, save_puzzle

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Sliding-tile puzzle solver.")


# -- helpers ------------------------------------------------------------------


def parse_layout(text: str) -> list[list[int]]:
    """Parse ``"1,2,3/4,0,6/7,5,8"`` (rows split on ``/`` or ``;``)."""
    rows = [r for r in re.split(r"[/;]", text) if r.strip()]
    try:
        return [[int(v) for v in re.split(r"[,\s]+", row.strip())] for row in rows]
    except ValueError as exc:
        raise InvalidBoardError(f"Cannot parse board {text!r}: {exc}") from exc


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {message}")
    return typer.Exit(code=2)


def _load_board(
    board: Optional[str], goal: Optional[str], file: Optional[Path]
) -> tuple[Board, Optional[int]]:
    """Build the board from the options; fall back to the demo puzzle."""
    try:
        if file is not None:
            puzzle = load_puzzle(file)
            if goal is not None:
                puzzle.goal = parse_layout(goal)
            return puzzle.to_board(), puzzle.optimal
        layout = parse_layout(board) if board is not None else DEMO_LAYOUT
        if goal is not None:
            return Board.with_goal(layout, parse_layout(goal)), None
        return Board.from_layout(layout), None
    except (InvalidBoardError, OSError, ValueError) as exc:
        raise _fail(str(exc)) from exc


BoardOpt = typer.Option(None, "-b", "--board", help='Rows split by "/", e.g. "1,2,3/4,0,6/7,5,8".')
GoalOpt = typer.Option(None, "-g", "--goal", help="Custom goal layout, same format as --board.")
FileOpt = typer.Option(
    None, "-f", "--file", exists=True, dir_okay=False,
    help="JSON puzzle file with 'initial' and optional 'goal'/'optimal'.",
)
VerboseOpt = typer.Option(False, "-v", "--verbose", help="Log search progress.")


# -- commands -----------------------------------------------------------------


@app.command()
def solve(
    board: Optional[str] = BoardOpt,
    goal: Optional[str] = GoalOpt,
    file: Optional[Path] = FileOpt,
    method: Method = typer.Option(Method.astar, "-m", "--method", help="Search strategy."),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0, envvar="TAQUIN_MAX_DEPTH",
        help=f"Depth ceiling for BFS/DFS (default {BFS_MAX_DEPTH}/{DFS_MAX_DEPTH}).",
    ),
    optimal: Optional[int] = typer.Option(
        None, "--optimal", min=0, help="Known optimal length, used to grade the result.",
    ),
    trace: bool = typer.Option(False, "--trace", help="Print every node expansion."),
    trace_limit: Optional[int] = typer.Option(
        None, "--trace-limit", min=1, help="Print at most this many expansions.",
    ),
    steps: bool = typer.Option(True, "--steps/--no-steps", help="Show each intermediate board."),
    verbose: bool = VerboseOpt,
) -> None:
    """Solve one puzzle with a single method."""
    setup_logging(verbose)
    start, known = _load_board(board, goal, file)
    observer = TraceObserver(console, trace_limit) if trace else None

    solver = create_solver(method, start, max_depth=max_depth, observer=observer)
    console.print(f"\nSolving with [bold]{solver.method}[/bold]…", style="yellow")
    solution = solver.solve(optimal if optimal is not None else known)

    render_solution(start, solution, solver.method, out=console, steps=steps)
    if solution is None:
        raise typer.Exit(code=1)


@app.command()
def compare(
    board: Optional[str] = BoardOpt,
    goal: Optional[str] = GoalOpt,
    file: Optional[Path] = FileOpt,
    methods: Optional[List[Method]] = typer.Option(
        None, "-m", "--method", help="Methods to run (repeatable). Default: all.",
    ),
    bfs_depth: int = typer.Option(
        BFS_MAX_DEPTH, "--bfs-depth", min=0, envvar="TAQUIN_BFS_MAX_DEPTH",
        help="Depth ceiling for BFS.",
    ),
    dfs_depth: int = typer.Option(
        DFS_MAX_DEPTH, "--dfs-depth", min=0, envvar="TAQUIN_DFS_MAX_DEPTH",
        help="Depth ceiling for DFS.",
    ),
    report: Optional[Path] = typer.Option(
        None, "-r", "--report", dir_okay=False, help="Write a Markdown report here.",
    ),
    verbose: bool = VerboseOpt,
) -> None:
    """Run several methods on the same puzzle and compare them."""
    setup_logging(verbose)
    start, known = _load_board(board, goal, file)
    chosen = methods or list(Method)

    if not is_solvable(start):
        console.print("[yellow]This board cannot reach its goal; expect no solutions.[/yellow]")

    runs = compare_methods(
        start,
        chosen,
        optimal_length=known,
        max_depths={Method.bfs: bfs_depth, Method.dfs: dfs_depth},
    )

    render_comparison(start, runs, out=console)
    if report is not None:
        write_report(report, start, runs)
        console.print(f"\n[green]Report written to {report}[/green]")


@app.command()
def scramble(
    size: int = typer.Option(3, "-s", "--size", min=2, max=8, help="Grid size (2-8)."),
    moves: Optional[int] = typer.Option(None, "--moves", min=0, help="Random-walk length."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a repeatable board."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", dir_okay=False, help="Save the puzzle as JSON.",
    ),
) -> None:
    """Generate a random solvable puzzle."""
    board = GameGenerator.generate(size, moves=moves, seed=seed)
    show_board(board, title="Scrambled", out=console)
    console.print("  " + "/".join(",".join(map(str, row)) for row in board.rows()))
    if output is not None:
        save_puzzle(output, PuzzleFile.from_board(board))
        console.print(f"[green]Saved to {output}[/green]")


@app.command()
def check(
    board: Optional[str] = BoardOpt,
    goal: Optional[str] = GoalOpt,
    file: Optional[Path] = FileOpt,
) -> None:
    """Show a board, its Manhattan distance and whether it can be solved."""
    start, _ = _load_board(board, goal, file)
    show_board(start, out=console)
    console.print(f"  Manhattan distance: [bold yellow]{start.manhattan_distance()}[/bold yellow]")
    if start.is_goal():
        console.print("  [green]Already at the goal.[/green]")
    elif is_solvable(start):
        console.print("  [green]Solvable.[/green]")
    else:
        console.print("  [red]Unsolvable: the goal is in the other half of the state space.[/red]")


if __name__ == "__main__":
    app()
