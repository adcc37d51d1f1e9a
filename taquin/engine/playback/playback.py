"""Replays move sequences against copies of a board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from taquin.models.board import Board, Direction


def replay(board: Board, moves: Iterable[Direction]) -> Iterator[Board]:
    """Yield a snapshot of the board after each move.

    *board* is left untouched. An illegal move raises
    :class:`~taquin.models.board.InvalidMoveError` at the step it occurs.
    """
    current = board.copy()
    for direction in moves:
        current.make_move(direction)
        yield current.copy()


def apply_moves(board: Board, moves: Iterable[Direction]) -> Board:
    """Return a copy of *board* with every move applied."""
    current = board.copy()
    for direction in moves:
        current.make_move(direction)
    return current
