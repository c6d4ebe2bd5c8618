"""Service layer helpers."""

from .leaderboard import leaderboard_to_dict, order_clauses, top_solutions

__all__ = [
    "leaderboard_to_dict",
    "order_clauses",
    "top_solutions",
]
