"""Sudoku board endpoints."""

from __future__ import annotations

from typing import Any, Dict

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...core import ROW_ID_MAX, DatabaseConnection, get_database_connection
from ...models import BoardDifficulty, SudokuBoard

router = APIRouter(tags=["boards"])
log = structlog.get_logger()


def _parse_difficulty(raw: Any) -> int | None:
    if isinstance(raw, str):
        tier = BoardDifficulty.from_name(raw)
        if tier is None and raw.strip().isdigit():
            tier = BoardDifficulty.from_numeric(int(raw))
    else:
        tier = BoardDifficulty.from_numeric(raw)
    return int(tier) if tier is not None else None


@router.post("/boards", status_code=status.HTTP_201_CREATED)
def create_board(body: Dict[str, Any], db: DatabaseConnection = Depends(get_database_connection)):
    """Store a solved board so solutions can be submitted against it."""

    difficulty = _parse_difficulty(body.get("difficulty"))
    if difficulty is None:
        raise HTTPException(400, "Unknown board difficulty")

    board = SudokuBoard.new(str(body.get("full_board") or "").strip(), difficulty)
    if board is None:
        raise HTTPException(400, "A full board is 81 digits from 1 to 9")

    board.insert(db.session())
    log.info("board_created", board_id=board.id, difficulty=board.difficulty)
    return board.to_dict()


@router.get("/boards/{board_id}")
def get_board(
    board_id: int = Path(ge=1, le=ROW_ID_MAX),
    db: DatabaseConnection = Depends(get_database_connection),
):
    """Get a specific board by ID."""

    board = SudokuBoard.get(board_id, db.session())
    if not board:
        raise HTTPException(404, "Board not found")
    return board.to_dict()


__all__ = ["router"]
