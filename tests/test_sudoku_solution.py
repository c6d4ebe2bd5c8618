from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from conftest import FULL_BOARD, SKELETON
from sudoku_backend.models import BoardDifficulty, SudokuBoard, SudokuSolution


def _board(board_id=7, difficulty=2) -> SudokuBoard:
    return SudokuBoard(id=board_id, full_board=FULL_BOARD, difficulty=difficulty)


@pytest.mark.parametrize("difficulty", [1, 2, 3, 0, 17])
@pytest.mark.parametrize("seconds", [0, 60, 10**6])
def test_unsaved_board_yields_nothing(difficulty, seconds):
    board = _board(board_id=None, difficulty=difficulty)
    assert SudokuSolution.new("solver", SKELETON, board, timedelta(seconds=seconds)) is None


@pytest.mark.parametrize("difficulty", [0, 4, -3, 100])
def test_unknown_difficulty_yields_nothing(difficulty):
    board = _board(difficulty=difficulty)
    assert SudokuSolution.new("solver", SKELETON, board, timedelta(seconds=60)) is None


def test_duration_rejected_by_tier_yields_nothing():
    board = _board(difficulty=1)
    assert SudokuSolution.new("solver", SKELETON, board, timedelta(hours=3)) is None


@pytest.mark.parametrize("difficulty", [1, 2, 3])
def test_valid_solve_is_scored_by_its_tier(difficulty):
    duration = timedelta(seconds=125, milliseconds=900)
    solution = SudokuSolution.new("solver", SKELETON, _board(difficulty=difficulty), duration)

    assert solution is not None
    assert solution.id is None
    assert solution.display_name == "solver"
    assert solution.board_id == 7
    assert solution.skeleton == SKELETON
    assert solution.difficulty == difficulty
    assert solution.solution_duration_secs == 125
    assert solution.score == BoardDifficulty(difficulty).score(duration)
    assert solution.solution_time.microsecond == 0
    assert solution.solution_time.utcoffset() == timedelta(0)


def test_insert_assigns_id_and_round_trips(session):
    board = SudokuBoard.new(FULL_BOARD, 3)
    board.insert(session)

    solution = SudokuSolution.new("solver", SKELETON, board, timedelta(minutes=20))
    solution_id = solution.insert(session)

    assert solution_id is not None
    assert solution.id == solution_id

    session.expunge_all()
    stored = SudokuSolution.get(solution_id, session)
    assert stored.to_dict() == solution.to_dict()


def test_insert_is_idempotent_once_id_is_known(session):
    board = SudokuBoard.new(FULL_BOARD, 1)
    board.insert(session)
    solution = SudokuSolution.new("solver", SKELETON, board, timedelta(minutes=5))

    first = solution.insert(session)
    assert solution.insert(session) == first
    assert len(session.exec(select(SudokuSolution)).all()) == 1


def test_insert_requires_existing_board(session):
    solution = SudokuSolution.new("solver", SKELETON, _board(board_id=999), timedelta(minutes=5))

    with pytest.raises(IntegrityError):
        solution.insert(session)


def test_get_missing_solution(session):
    assert SudokuSolution.get(12345, session) is None


def test_board_insert_keeps_utc_creation_time(session):
    board = SudokuBoard.new(FULL_BOARD, 2)
    board_id = board.insert(session)

    session.expunge_all()
    stored = SudokuBoard.get(board_id, session)
    assert stored.to_dict()["creation_time"].endswith("+00:00")
    assert stored.to_dict() == board.to_dict()
