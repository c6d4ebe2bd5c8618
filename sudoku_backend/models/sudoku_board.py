"""Database model for stored sudoku boards."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import Field as ORMField, Session, SQLModel

from ..core.time import isoformat_utc, utcnow_seconds
from .sudoku_difficulty import BoardDifficulty

BOARD_CELLS = 81


class SudokuBoard(SQLModel, table=True):
    """A fully solved board, the source every skeleton is cut from."""

    __tablename__ = "sudoku_board"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    full_board: str
    difficulty: int
    creation_time: datetime = ORMField(default_factory=utcnow_seconds)

    @classmethod
    def new(cls, full_board: str, difficulty: int) -> Optional["SudokuBoard"]:
        """Build an unsaved board, or ``None`` if the board or tier is invalid."""

        tier = BoardDifficulty.from_numeric(difficulty)
        if tier is None or not is_full_board(full_board):
            return None
        return cls(full_board=full_board, difficulty=int(tier))

    @classmethod
    def get(cls, board_id: int, session: Session) -> Optional["SudokuBoard"]:
        return session.get(cls, board_id)

    def insert(self, session: Session) -> int:
        """Persist this board if it is new and return its id."""

        if self.id is None:
            session.add(self)
            session.commit()
            session.refresh(self)
        if self.id is None:
            raise RuntimeError("sudoku board has no id after insertion")
        return self.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "full_board": self.full_board,
            "difficulty": self.difficulty,
            "creation_time": isoformat_utc(self.creation_time),
        }


def is_full_board(board: str) -> bool:
    """Whether ``board`` is 81 digits one to nine in row-major order."""

    return (
        isinstance(board, str)
        and len(board) == BOARD_CELLS
        and all(cell in "123456789" for cell in board)
    )


__all__ = ["BOARD_CELLS", "SudokuBoard", "is_full_board"]
