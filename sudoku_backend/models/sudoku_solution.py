"""Database model for submitted sudoku solutions."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from sqlmodel import Field as ORMField, Session, SQLModel

from ..core.time import isoformat_utc, utcnow_seconds
from .sudoku_board import SudokuBoard
from .sudoku_difficulty import BoardDifficulty


class SudokuSolution(SQLModel, table=True):
    """A scored solve of a stored board, as it appears on the leaderboard."""

    __tablename__ = "sudoku_solutions"

    # Assigned by the database on insert.
    id: Optional[int] = ORMField(default=None, primary_key=True)
    display_name: str
    board_id: int = ORMField(foreign_key="sudoku_board.id", index=True)
    skeleton: str
    # Numeric BoardDifficulty, one to three.
    difficulty: int
    solution_duration_secs: int
    score: int = ORMField(index=True)
    solution_time: datetime

    @classmethod
    def new(
        cls,
        solver_name: str,
        skeleton: str,
        solved_board: SudokuBoard,
        solution_duration: timedelta,
    ) -> Optional["SudokuSolution"]:
        """Create a ready-to-insert, scored solution of ``solved_board``.

        Returns ``None`` when the board has not been persisted yet, when its
        difficulty is not a known tier, or when that tier refuses to score
        ``solution_duration``. Nothing is written anywhere.
        """

        if solved_board.id is None:
            return None

        tier = BoardDifficulty.from_numeric(solved_board.difficulty)
        if tier is None:
            return None

        score = tier.score(solution_duration)
        if score is None:
            return None

        return cls(
            id=None,
            display_name=str(solver_name),
            board_id=solved_board.id,
            skeleton=str(skeleton),
            difficulty=solved_board.difficulty,
            solution_duration_secs=int(solution_duration.total_seconds()),
            score=score,
            solution_time=utcnow_seconds(),
        )

    @classmethod
    def get(cls, solution_id: int, session: Session) -> Optional["SudokuSolution"]:
        return session.get(cls, solution_id)

    def insert(self, session: Session) -> int:
        """Insert this solution into the database, updating its id.

        Solutions that already carry an id are left as they are.
        """

        if self.id is None:
            session.add(self)
            session.commit()
            session.refresh(self)
        if self.id is None:
            raise RuntimeError("sudoku solution has no id after insertion")
        return self.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "board_id": self.board_id,
            "skeleton": self.skeleton,
            "difficulty": self.difficulty,
            "solution_duration_secs": self.solution_duration_secs,
            "score": self.score,
            "solution_time": isoformat_utc(self.solution_time),
        }


__all__ = ["SudokuSolution"]
