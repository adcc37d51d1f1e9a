"""Parity test for whether a board can reach its goal at all."""

from __future__ import annotations

from taquin.models.board import Board, goal_positions


def permutation_parity(perm: list[int]) -> int:
    """0 for an even permutation, 1 for an odd one."""
    seen = [False] * len(perm)
    cycles = 0
    for start in range(len(perm)):
        if seen[start]:
            continue
        cycles += 1
        i = start
        while not seen[i]:
            seen[i] = True
            i = perm[i]
    return (len(perm) - cycles) % 2


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach its goal arrangement.

    Every slide is one transposition and moves the blank one cell, so
    the parity of the tile permutation and the parity of the blank's
    grid distance from its goal cell flip together. They start equal on
    exactly the solvable boards. Works for any size and any goal.
    """
    n = board.size
    positions = goal_positions(board.goal_tiles)
    perm = [positions[v] for v in board.tiles]

    row, col = divmod(board.blank_index, n)
    goal_row, goal_col = divmod(positions[0], n)
    blank_distance = abs(row - goal_row) + abs(col - goal_col)

    return permutation_parity(perm) == blank_distance % 2
