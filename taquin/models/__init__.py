from taquin.models.board import Board, Direction, InvalidBoardError, InvalidMoveError
from taquin.models.puzzlefile import PuzzleFile, load_puzzle, save_puzzle
from taquin.models.solution import MoveQuality, SolutionInfo

__all__ = [
    "Board",
    "Direction",
    "InvalidBoardError",
    "InvalidMoveError",
    "MoveQuality",
    "PuzzleFile",
    "SolutionInfo",
    "load_puzzle",
    "save_puzzle",
]
