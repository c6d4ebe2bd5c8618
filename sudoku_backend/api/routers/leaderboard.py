"""Solution submission and leaderboard endpoints."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...core import (
    ROW_ID_MAX,
    DatabaseConnection,
    LeaderboardConfig,
    get_database_connection,
    leaderboard_config,
)
from ...models import SudokuBoard, SudokuSolution
from ...services.leaderboard import leaderboard_to_dict, top_solutions

router = APIRouter(tags=["leaderboard"])
log = structlog.get_logger()

DISPLAY_NAME_MAX = 40


@router.post("/solutions", status_code=status.HTTP_201_CREATED)
def submit_solution(body: Dict[str, Any], db: DatabaseConnection = Depends(get_database_connection)):
    """Score a solve of a stored board and record it on the leaderboard."""

    display_name = str(body.get("display_name") or "").strip()[:DISPLAY_NAME_MAX]
    if not display_name:
        raise HTTPException(400, "Display name required")

    try:
        board_id = int(body.get("board_id"))
        duration_secs = int(body.get("solution_duration_secs"))
        duration = timedelta(seconds=duration_secs)
    except (TypeError, ValueError, OverflowError):
        raise HTTPException(400, "board_id and solution_duration_secs must be integers")

    session = db.session()
    board = SudokuBoard.get(board_id, session) if 1 <= board_id <= ROW_ID_MAX else None
    if not board:
        raise HTTPException(404, "Board not found")

    solution = SudokuSolution.new(
        display_name,
        str(body.get("skeleton") or ""),
        board,
        duration,
    )
    if solution is None:
        log.info("solution_rejected", board_id=board_id, duration_secs=duration_secs)
        raise HTTPException(400, "Solution cannot be scored")

    solution.insert(session)
    log.info(
        "solution_recorded",
        solution_id=solution.id,
        board_id=board_id,
        score=solution.score,
    )
    return solution.to_dict()


@router.get("/solutions/{solution_id}")
def get_solution(
    solution_id: int = Path(ge=1, le=ROW_ID_MAX),
    db: DatabaseConnection = Depends(get_database_connection),
):
    """Get a specific solution by ID."""

    solution = SudokuSolution.get(solution_id, db.session())
    if not solution:
        raise HTTPException(404, "Solution not found")
    return solution.to_dict()


@router.get("/leaderboard")
def get_leaderboard(
    config: LeaderboardConfig = Depends(leaderboard_config),
    db: DatabaseConnection = Depends(get_database_connection),
):
    """Get the best solutions across all boards."""

    return leaderboard_to_dict(config, top_solutions(db.session(), config))


@router.get("/leaderboard/{board_id}")
def get_board_leaderboard(
    board_id: int = Path(ge=1, le=ROW_ID_MAX),
    config: LeaderboardConfig = Depends(leaderboard_config),
    db: DatabaseConnection = Depends(get_database_connection),
):
    """Get the best solutions of one board."""

    session = db.session()
    if not SudokuBoard.get(board_id, session):
        raise HTTPException(404, "Board not found")
    return {"board_id": board_id, **leaderboard_to_dict(config, top_solutions(session, config, board_id))}


__all__ = ["router"]
