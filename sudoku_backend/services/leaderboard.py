"""Leaderboard queries over stored solutions."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlmodel import Session, select

from ..core.leaderboard import LeaderboardConfig, SolutionOrdering
from ..models import SudokuSolution


def order_clauses(ordering: SolutionOrdering) -> Sequence[Any]:
    """SQL ``ORDER BY`` clauses for a leaderboard ordering."""

    if ordering is SolutionOrdering.FASTEST:
        return (
            SudokuSolution.solution_duration_secs.asc(),
            SudokuSolution.score.desc(),
            SudokuSolution.id.asc(),
        )
    if ordering is SolutionOrdering.NEWEST:
        return (SudokuSolution.solution_time.desc(), SudokuSolution.id.desc())
    if ordering is SolutionOrdering.OLDEST:
        return (SudokuSolution.solution_time.asc(), SudokuSolution.id.asc())
    # Ties on score go to whoever got there first.
    return (
        SudokuSolution.score.desc(),
        SudokuSolution.solution_time.asc(),
        SudokuSolution.id.asc(),
    )


def top_solutions(
    session: Session, config: LeaderboardConfig, board_id: Optional[int] = None
) -> List[SudokuSolution]:
    """Return up to ``config.count`` solutions in ``config.ordering``."""

    statement = select(SudokuSolution)
    if board_id is not None:
        statement = statement.where(SudokuSolution.board_id == board_id)
    statement = statement.order_by(*order_clauses(config.ordering)).limit(config.count)
    return list(session.exec(statement).all())


def leaderboard_to_dict(
    config: LeaderboardConfig, solutions: Sequence[SudokuSolution]
) -> Dict[str, Any]:
    return {
        "config": {"count": config.count, "ordering": config.ordering.value},
        "entries": [
            {"rank": rank, **solution.to_dict()}
            for rank, solution in enumerate(solutions, start=1)
        ],
    }


__all__ = ["leaderboard_to_dict", "order_clauses", "top_solutions"]
