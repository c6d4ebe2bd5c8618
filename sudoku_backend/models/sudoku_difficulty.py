"""Board difficulty tiers and their scoring rules."""

from __future__ import annotations

from datetime import timedelta
from enum import IntEnum
from typing import Any, Optional

_I32_MAX = 2**31 - 1


class BoardDifficulty(IntEnum):
    """Difficulty tier of a board, stored numerically as one to three."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @classmethod
    def from_numeric(cls, value: Any) -> Optional["BoardDifficulty"]:
        """Map a stored tier number to its tier, or ``None`` if unrecognised."""

        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_name(cls, name: str) -> Optional["BoardDifficulty"]:
        return cls.__members__.get((name or "").strip().upper())

    @property
    def base_points(self) -> int:
        return _TIER_RULES[self][0]

    @property
    def time_allowance(self) -> int:
        """Longest solve, in seconds, that still earns a score."""

        return _TIER_RULES[self][1]

    def score(self, duration: timedelta) -> Optional[int]:
        """Score a solve of the given duration.

        Faster solves score higher: the result falls linearly from twice the
        tier's base points at zero seconds down to the base points at the
        allowance. Negative durations and durations past the allowance
        are rejected with ``None``.
        """

        secs = int(duration.total_seconds())
        if secs < 0 or secs > _I32_MAX or secs > self.time_allowance:
            return None

        base = self.base_points
        return base + base * (self.time_allowance - secs) // self.time_allowance


# tier: (base points, time allowance in seconds)
_TIER_RULES = {
    BoardDifficulty.EASY: (100, 30 * 60),
    BoardDifficulty.MEDIUM: (250, 60 * 60),
    BoardDifficulty.HARD: (500, 120 * 60),
}


__all__ = ["BoardDifficulty"]
