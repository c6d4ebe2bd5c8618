"""Sudoku puzzle game backend: boards, scored solutions and leaderboards."""
