"""Rich terminal frontend: boards, solutions, comparisons and live traces.

Uses the ``rich`` library for styled output. Everything here only reads
boards and results; the search itself lives in ``taquin.engine``.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taquin.engine.benchmark import MethodRun
from taquin.engine.playback import apply_moves, replay
from taquin.engine.solver import ExpansionEvent, MoveGrade
from taquin.models.board import Board
from taquin.models.solution import MoveQuality, SolutionInfo

console = Console()

_QUALITY_STYLE = {
    MoveQuality.BEST: "bold green",
    MoveQuality.MEDIUM: "bold yellow",
    MoveQuality.POOR: "bold red",
}

_QUALITY_LABEL = {
    MoveQuality.BEST: "OPTIMAL (best)",
    MoveQuality.MEDIUM: "ACCEPTABLE (medium)",
    MoveQuality.POOR: "SUB-OPTIMAL (poor)",
}

_GRADE_STYLE = {
    MoveGrade.BEST: "green",
    MoveGrade.MID: "yellow",
    MoveGrade.BAD: "red",
}


# -- board rendering ----------------------------------------------------------


def _tile_cells(board: Board, width: int) -> list[list[str]]:
    rows: list[list[str]] = []
    for r in range(board.size):
        cells: list[str] = []
        for c in range(board.size):
            val = board.get_tile(r, c)
            if val == 0:
                cells.append(f"[dim]{'_':>{width}}[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        rows.append(cells)
    return rows


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")
    for cells in _tile_cells(board, width):
        table.add_row(*cells)
    return table


def show_board(board: Board, title: str = "Puzzle", out: Console | None = None) -> None:
    out = out or console
    n = board.size
    panel = Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]{title}  {n}×{n}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    out.print(Align.center(panel))


# -- solution rendering -------------------------------------------------------


def render_solution(
    board: Board,
    solution: SolutionInfo | None,
    method: str,
    out: Console | None = None,
    steps: bool = True,
) -> None:
    """Print the verdict for *method* and, optionally, every board along the way."""
    out = out or console
    show_board(board, title="Initial state", out=out)

    if solution is None:
        out.print(Align.center(Text(f"\n{method}: no solution found!\n", style="bold red")))
        return

    style = _QUALITY_STYLE[solution.quality]
    verdict = Text()
    verdict.append(f"\n  {method}: ", style="bold cyan")
    verdict.append(f"solution found, {len(solution)} moves", style=style)
    if solution.optimal_length is not None:
        verdict.append(f"  (optimal: {solution.optimal_length})", style="dim")
    verdict.append("\n  Quality: ", style="dim")
    verdict.append(_QUALITY_LABEL[solution.quality], style=style)
    out.print(Align.center(verdict))

    if not solution.moves:
        return
    if not steps:
        show_board(apply_moves(board, solution.moves), title="Final state", out=out)
        return

    for i, (direction, after) in enumerate(zip(solution.moves, replay(board, solution.moves)), 1):
        out.print(Align.center(Text(f"\nStep {i}: {direction.value}", style=style)))
        out.print(Align.center(render_board(after)))


def render_comparison(board: Board, runs: list[MethodRun], out: Console | None = None) -> None:
    """Side-by-side summary of several methods on the same board."""
    out = out or console
    show_board(board, title="Initial state", out=out)

    table = Table(
        title="Method comparison",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="bright_cyan",
    )
    table.add_column("Method", style="bold yellow")
    table.add_column("Moves", justify="right")
    table.add_column("Quality")
    table.add_column("Time", justify="right", style="yellow")
    table.add_column("Expanded", justify="right", style="dim")
    table.add_column("Max frontier", justify="right", style="dim")
    table.add_column("First moves", style="magenta")

    for run in runs:
        if run.solution is None:
            table.add_row(
                run.method.value, "[red]-[/red]", "[bright_red]no solution[/bright_red]",
                f"{run.elapsed:.4f}s", str(run.stats.expanded), str(run.stats.max_frontier), "",
            )
            continue
        quality = run.solution.quality
        first = " ".join(d.value for d in run.solution.moves[:8])
        if len(run.solution) > 8:
            first += " …"
        table.add_row(
            run.method.value,
            str(len(run.solution)),
            f"[{_QUALITY_STYLE[quality]}]{quality.value}[/]",
            f"{run.elapsed:.4f}s",
            str(run.stats.expanded),
            str(run.stats.max_frontier),
            first,
        )
    out.print(Align.center(table))


# -- tracing ------------------------------------------------------------------


class TraceObserver:
    """Prints every expansion a solver reports, with its graded moves.

    *limit* caps how many expansions are printed; the search itself keeps
    going.
    """

    def __init__(self, out: Console | None = None, limit: int | None = None) -> None:
        self.out = out or console
        self.limit = limit
        self.seen = 0
        self._depth = -1

    def __call__(self, event: ExpansionEvent) -> None:
        self.seen += 1
        if self.limit is not None and self.seen > self.limit:
            return

        if event.depth != self._depth:
            self.out.print(Text(f"\nMoving to depth {event.depth}…", style="blue"))
            self._depth = event.depth

        board = Board.from_flat(event.size, event.tiles, event.goal)
        moves = Text()
        for graded in event.moves:
            moves.append(f"\n- {graded.direction.value:<5} ", style=_GRADE_STYLE[graded.grade])
            moves.append(f"[{graded.grade.value.upper()}]", style=_GRADE_STYLE[graded.grade])
            moves.append(f" | {graded.reason}", style="dim")

        self.out.print(
            Panel(
                Group(render_board(board), moves),
                title=f"[bold]{event.method}[/bold]  depth {event.depth}",
                subtitle=f"visited: {event.visited}",
                border_style="cyan",
                expand=False,
            )
        )
