"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random
from collections.abc import Sequence

from taquin.config import DEFAULT_SCRAMBLE_FACTOR
from taquin.models.board import Board, Direction, default_goal


class GameGenerator:
    """Creates solvable puzzles by random-walking away from the goal."""

    @staticmethod
    def solved(size: int, goal: Sequence[int] | None = None) -> Board:
        """Return a board already sitting on its goal (default: blank bottom-right)."""
        goal_tiles = list(goal) if goal is not None else default_goal(size)
        return Board.from_flat(size, goal_tiles, goal_tiles)

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random | None = None) -> list[Direction]:
        """Scramble *board* in-place with *moves* random legal moves.

        Never immediately undoes the previous move. Returns the moves made.
        """
        rng = rng or random.Random()
        made: list[Direction] = []
        prev: Direction | None = None

        for _ in range(moves):
            options = board.possible_moves()
            if prev is not None and prev.opposite in options and len(options) > 1:
                options.remove(prev.opposite)
            direction = rng.choice(options)
            board.make_move(direction)
            made.append(direction)
            prev = direction
        return made

    @staticmethod
    def generate(size: int, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board, unsolved unless *moves* is 0."""
        if size < 2:
            raise ValueError(f"Cannot scramble a {size}×{size} board.")
        if moves is None:
            moves = size * size * DEFAULT_SCRAMBLE_FACTOR
        rng = random.Random(seed)

        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, moves, rng)
        # A walk can loop back onto the goal; one more step always leaves it.
        if moves and board.is_goal():
            GameGenerator.scramble(board, 1, rng)
        return board
