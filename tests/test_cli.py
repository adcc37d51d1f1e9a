from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from taquin.main import app, parse_layout
from taquin.models.board import InvalidBoardError
from taquin.models.puzzlefile import load_puzzle

runner = CliRunner()


def test_parse_layout() -> None:
    assert parse_layout("1,2,3/4,0,6/7,5,8") == [[1, 2, 3], [4, 0, 6], [7, 5, 8]]
    assert parse_layout("1 2; 3 0") == [[1, 2], [3, 0]]
    with pytest.raises(InvalidBoardError):
        parse_layout("1,x/3,0")


def test_solve_demo_puzzle() -> None:
    result = runner.invoke(app, ["solve", "--no-steps"])
    assert result.exit_code == 0, result.output
    assert "7 moves" in result.output


@pytest.mark.parametrize("method", ["bfs", "dfs", "astar"])
def test_solve_given_board(method: str) -> None:
    result = runner.invoke(app, ["solve", "-b", "1,2,3/4,0,6/7,5,8", "-m", method])
    assert result.exit_code == 0, result.output
    assert "solution found" in result.output
    assert "Step 1: " in result.output


def test_solve_astar_shows_steps() -> None:
    result = runner.invoke(app, ["solve", "-b", "1,2,3/4,0,6/7,5,8"])
    assert "Step 1: down" in result.output
    assert "Step 2: right" in result.output
    assert "OPTIMAL (best)" in result.output


def test_solve_with_custom_goal() -> None:
    result = runner.invoke(app, ["solve", "-b", "1,2/3,0", "-g", "1,0/3,2"])
    assert result.exit_code == 0, result.output
    assert "Step 1: up" in result.output


def test_solve_reports_missing_solution() -> None:
    result = runner.invoke(app, ["solve", "-b", "2,1/3,0", "-m", "bfs"])
    assert result.exit_code == 1
    assert "no solution found" in result.output


def test_solve_rejects_malformed_board() -> None:
    result = runner.invoke(app, ["solve", "-b", "1,1/3,0"])
    assert result.exit_code == 2


def test_solve_trace() -> None:
    result = runner.invoke(
        app, ["solve", "-b", "1,2,3/4,0,6/7,5,8", "-m", "bfs", "--trace", "--trace-limit", "2"]
    )
    assert result.exit_code == 0, result.output
    assert "depth 0" in result.output
    assert "BEST" in result.output


def test_solve_respects_max_depth() -> None:
    result = runner.invoke(app, ["solve", "-m", "bfs", "--max-depth", "3", "--no-steps"])
    assert result.exit_code == 1


def test_solve_from_file(tmp_path: Path) -> None:
    path = tmp_path / "p.json"
    path.write_text(json.dumps({"initial": [[1, 2, 3], [4, 0, 6], [7, 5, 8]], "optimal": 2}))

    result = runner.invoke(app, ["solve", "-f", str(path), "-m", "dfs", "--no-steps"])
    assert result.exit_code == 0, result.output
    assert "optimal: 2" in result.output


def test_compare_writes_report(tmp_path: Path) -> None:
    report = tmp_path / "results.md"
    result = runner.invoke(app, ["compare", "-b", "1,2,3/4,0,6/7,5,8", "-r", str(report)])

    assert result.exit_code == 0, result.output
    assert "Method comparison" in result.output
    assert report.exists()
    assert "## astar" in report.read_text()


def test_compare_selected_methods(tmp_path: Path) -> None:
    report = tmp_path / "results.md"
    result = runner.invoke(
        app, ["compare", "-m", "astar", "-m", "bfs", "--bfs-depth", "3", "-r", str(report)]
    )
    assert result.exit_code == 0, result.output
    text = report.read_text()
    assert "## dfs" not in text
    assert "| Steps | 7 | Failed |" in text


def test_scramble_to_file(tmp_path: Path) -> None:
    path = tmp_path / "scrambled.json"
    result = runner.invoke(app, ["scramble", "-s", "3", "--moves", "10", "--seed", "1", "-o", str(path)])

    assert result.exit_code == 0, result.output
    board = load_puzzle(path).to_board()
    assert board.size == 3
    assert not board.is_goal()


def test_check_board() -> None:
    result = runner.invoke(app, ["check", "-b", "1,0/2,3", "-g", "1,2/3,0"])
    assert result.exit_code == 0, result.output
    assert "Unsolvable" in result.output

    result = runner.invoke(app, ["check"])
    assert "Manhattan distance: 7" in result.output
    assert "Solvable" in result.output


def test_check_rejects_non_integer_tiles(tmp_path: Path) -> None:
    path = tmp_path / "p.json"
    path.write_text(json.dumps({"initial": [[1.9, 0], [3, 2]]}))

    result = runner.invoke(app, ["check", "-f", str(path)])
    assert result.exit_code == 2
    assert "Solvable" not in result.output
