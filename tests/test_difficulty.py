from __future__ import annotations

from datetime import timedelta

import pytest

from sudoku_backend.models import BoardDifficulty


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, BoardDifficulty.EASY),
        (2, BoardDifficulty.MEDIUM),
        (3, BoardDifficulty.HARD),
    ],
)
def test_from_numeric_known_tiers(value, expected):
    assert BoardDifficulty.from_numeric(value) is expected


@pytest.mark.parametrize("value", [0, 4, -1, 99, True, "1", 2.0, None])
def test_from_numeric_rejects_everything_else(value):
    assert BoardDifficulty.from_numeric(value) is None


def test_from_name_is_case_insensitive():
    assert BoardDifficulty.from_name(" hard ") is BoardDifficulty.HARD
    assert BoardDifficulty.from_name("Easy") is BoardDifficulty.EASY
    assert BoardDifficulty.from_name("impossible") is None


def test_score_falls_from_double_to_base_points():
    easy = BoardDifficulty.EASY
    assert easy.score(timedelta(0)) == 200
    assert easy.score(timedelta(minutes=15)) == 150
    assert easy.score(timedelta(minutes=30)) == 100


def test_score_scales_with_tier():
    assert BoardDifficulty.MEDIUM.score(timedelta(minutes=30)) == 375
    assert BoardDifficulty.HARD.score(timedelta(hours=1)) == 750


def test_score_truncates_to_whole_seconds():
    hard = BoardDifficulty.HARD
    assert hard.score(timedelta(seconds=100, milliseconds=999)) == hard.score(timedelta(seconds=100))


@pytest.mark.parametrize(
    "tier, duration",
    [
        (BoardDifficulty.EASY, timedelta(minutes=30, seconds=1)),
        (BoardDifficulty.MEDIUM, timedelta(hours=2)),
        (BoardDifficulty.HARD, timedelta(days=1)),
        (BoardDifficulty.HARD, timedelta(seconds=2**31)),
        (BoardDifficulty.EASY, timedelta(seconds=-5)),
    ],
)
def test_score_rejects_out_of_range_durations(tier, duration):
    assert tier.score(duration) is None
