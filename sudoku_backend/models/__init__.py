"""Database model exports."""

from .sudoku_board import SudokuBoard
from .sudoku_difficulty import BoardDifficulty
from .sudoku_solution import SudokuSolution

__all__ = [
    "BoardDifficulty",
    "SudokuBoard",
    "SudokuSolution",
]
