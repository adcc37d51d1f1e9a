from taquin.frontend.cli.rich.app import (
    TraceObserver,
    render_board,
    render_comparison,
    render_solution,
    show_board,
)

__all__ = [
    "TraceObserver",
    "render_board",
    "render_comparison",
    "render_solution",
    "show_board",
]
