"""Board model: construction, validation, moves, goal test, heuristic, display."""

from __future__ import annotations

import pytest

from taquin.models.board import Board, Direction, InvalidBoardError, InvalidMoveError

# -- construction -------------------------------------------------------------


def test_from_layout_flattens_row_major() -> None:
    board = Board.from_layout([[1, 2, 3], [4, 0, 6], [7, 5, 8]])

    assert board.size == 3
    assert board.tiles == [1, 2, 3, 4, 0, 6, 7, 5, 8]
    assert board.blank_index == 4
    assert board.goal_tiles == [1, 2, 3, 4, 5, 6, 7, 8, 0]
    assert board.rows() == [[1, 2, 3], [4, 0, 6], [7, 5, 8]]
    assert board.get_tile(2, 1) == 5


def test_from_flat_matches_from_layout() -> None:
    assert Board.from_flat(2, [1, 0, 3, 2]) == Board.from_layout([[1, 0], [3, 2]])


@pytest.mark.parametrize(
    "layout, message",
    [
        ([], "empty"),
        ([[1, 2, 3], [4, 0, 5]], "not square"),
        ([[1, 2], [3]], "not square"),
        ([[1, 1], [3, 0]], "more than once"),
        ([[1, 2], [3, 4]], "out of range"),
        ([[1, 2], [3, -1]], "out of range"),
        ([[1.7, 0], [3, 2]], "not an integer"),
        ([[True, 0], [3, 2]], "not an integer"),
        ([["1", 0], [3, 2]], "not an integer"),
    ],
    ids=[
        "empty", "not-square", "ragged", "duplicate", "too-large", "negative",
        "float-tile", "bool-tile", "str-tile",
    ],
)
def test_malformed_layout_rejected(layout, message: str) -> None:
    with pytest.raises(InvalidBoardError, match=message):
        Board.from_layout(layout)


@pytest.mark.parametrize(
    "size, flat",
    [(-1, [0]), (0, []), (2.0, [1, 0, 3, 2])],
    ids=["negative", "zero", "float"],
)
def test_from_flat_rejects_bad_size(size, flat) -> None:
    with pytest.raises(InvalidBoardError, match="positive integer"):
        Board.from_flat(size, flat)


def test_from_flat_rejects_non_integer_goal() -> None:
    with pytest.raises(InvalidBoardError, match="goal is not an integer"):
        Board.from_flat(2, [1, 0, 3, 2], goal=[1, 2, 3, 0.0])


def test_invalid_board_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Board.from_flat(3, [1, 2, 3])


def test_goal_must_match_board() -> None:
    with pytest.raises(InvalidBoardError, match="Goal is 3×3"):
        Board.with_goal([[1, 0], [3, 2]], [[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    with pytest.raises(InvalidBoardError, match="goal"):
        Board.with_goal([[1, 0], [3, 2]], [[1, 1], [3, 0]])


def test_inconsistent_blank_index_rejected() -> None:
    with pytest.raises(InvalidBoardError, match="blank_index"):
        Board(size=2, tiles=[1, 0, 3, 2], blank_index=3)


# -- goals --------------------------------------------------------------------


def test_custom_goal_drives_is_goal() -> None:
    board = Board.with_goal([[1, 0], [2, 3]], [[1, 2], [3, 0]])
    assert board.goal_tiles == [1, 2, 3, 0]
    assert not board.is_goal()

    on_goal = Board.with_goal([[1, 0], [2, 3]], [[1, 0], [2, 3]])
    assert on_goal.is_goal()
    assert not Board.from_layout([[1, 0], [2, 3]]).is_goal()


def test_is_tile_correct_uses_goal() -> None:
    board = Board.from_layout([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    assert board.is_tile_correct(0, 0)
    assert board.is_tile_correct(1, 2)
    assert not board.is_tile_correct(2, 1)
    assert not board.is_tile_correct(1, 1)


# -- moves --------------------------------------------------------------------


@pytest.mark.parametrize(
    "layout, expected",
    [
        ([[0, 1, 2], [3, 4, 5], [6, 7, 8]], [Direction.DOWN, Direction.RIGHT]),
        ([[1, 2, 3], [4, 5, 6], [7, 8, 0]], [Direction.UP, Direction.LEFT]),
        (
            [[1, 2, 3], [4, 0, 6], [7, 5, 8]],
            [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT],
        ),
        ([[1, 2, 3], [0, 4, 6], [7, 5, 8]], [Direction.UP, Direction.DOWN, Direction.RIGHT]),
    ],
    ids=["top-left", "bottom-right", "centre", "left-edge"],
)
def test_possible_moves(layout, expected) -> None:
    assert Board.from_layout(layout).possible_moves() == expected


def test_make_move_slides_blank() -> None:
    board = Board.from_layout([[1, 2, 3], [4, 0, 6], [7, 5, 8]])

    board.make_move(Direction.DOWN)
    assert board.rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert board.blank_index == 7

    board.make_move(Direction.RIGHT)
    assert board.is_goal()
    assert board.blank_index == 8


def test_illegal_move_raises() -> None:
    board = Board.from_layout([[0, 1], [2, 3]])
    with pytest.raises(InvalidMoveError, match="'up'") as excinfo:
        board.make_move(Direction.UP)

    assert excinfo.value.direction is Direction.UP
    assert board.tiles == [0, 1, 2, 3], "failed move must not change the board"
    with pytest.raises(ValueError):
        board.make_move(Direction.LEFT)


def test_opposite_directions_undo() -> None:
    board = Board.from_layout([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    for direction in Direction:
        board.make_move(direction)
        board.make_move(direction.opposite)
        assert board.tiles == [1, 2, 3, 4, 0, 6, 7, 5, 8]


def test_copy_is_independent() -> None:
    board = Board.from_layout([[1, 0], [3, 2]])
    clone = board.copy()
    clone.make_move(Direction.DOWN)

    assert board.tiles == [1, 0, 3, 2]
    assert clone.is_goal()


# -- heuristic ----------------------------------------------------------------


@pytest.mark.parametrize(
    "layout, distance",
    [
        ([[1, 2, 3], [4, 5, 6], [7, 8, 0]], 0),
        ([[1, 2, 3], [4, 0, 6], [7, 5, 8]], 2),
        ([[2, 3, 6], [1, 5, 0], [4, 7, 8]], 7),
        ([[8, 7, 6], [5, 4, 3], [2, 1, 0]], 16),
    ],
    ids=["solved", "two-moves", "demo", "reversed"],
)
def test_manhattan_distance(layout, distance: int) -> None:
    assert Board.from_layout(layout).manhattan_distance() == distance


def test_manhattan_zero_only_on_goal() -> None:
    board = Board.from_layout([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    assert board.manhattan_distance() > 0
    board.make_move(Direction.DOWN)
    board.make_move(Direction.RIGHT)
    assert board.manhattan_distance() == 0 and board.is_goal()


def test_manhattan_uses_custom_goal() -> None:
    board = Board.with_goal([[1, 2], [3, 0]], [[1, 0], [3, 2]])
    assert board.manhattan_distance() == 1


# -- display ------------------------------------------------------------------


def test_str_boxed_grid() -> None:
    board = Board.from_layout([[1, 2], [3, 0]])
    assert str(board) == (
        "┌───┬───┐\n"
        "│ 1 │ 2 │\n"
        "├───┼───┤\n"
        "│ 3 │ _ │\n"
        "└───┴───┘"
    )


def test_str_pads_wide_tiles() -> None:
    board = Board.from_flat(4, [*range(1, 16), 0])
    lines = str(board).splitlines()

    assert len(lines) == 9
    assert len({len(line) for line in lines}) == 1
    assert lines[-2] == "│ 13 │ 14 │ 15 │  _ │"
