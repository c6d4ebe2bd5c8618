"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Tuple

from dotenv import load_dotenv

load_dotenv(override=False)


# A configured file: the label it was given as, and the resolved path.
FilePair = Tuple[str, Path]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def file_pair(label: str) -> FilePair:
    """Resolve a configured file label into a ``(label, path)`` pair.

    ``$ROOT`` at the start of the label stands for the current working
    directory, so deployments can point at files relative to the checkout.
    """

    raw = label
    if raw.startswith("$ROOT"):
        raw = str(Path.cwd()) + raw[len("$ROOT"):]
    return label, Path(raw).expanduser()


# Files ----------------------------------------------------------------------
DATABASE_FILE = file_pair(os.getenv("SUDOKU_DATABASE_FILE", "$ROOT/data/sudoku-backend.db"))
LEADERBOARD_SETTINGS_FILE = file_pair(
    os.getenv("LEADERBOARD_SETTINGS_FILE", "$ROOT/leaderboard.toml")
)


# Connection pool ------------------------------------------------------------
DB_POOL_SIZE = _env_int("DB_POOL_SIZE", 5)
DB_POOL_TIMEOUT = _env_float("DB_POOL_TIMEOUT", 5.0)
DB_RESET = _env_bool("DB_RESET", False)


# HTTP -----------------------------------------------------------------------
_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")),
        *_local_dev_origins,
    ]
)


# Runtime behaviour ----------------------------------------------------------
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_VERSION",
    "DATABASE_FILE",
    "DB_POOL_SIZE",
    "DB_POOL_TIMEOUT",
    "DB_RESET",
    "FilePair",
    "LEADERBOARD_SETTINGS_FILE",
    "LOG_LEVEL",
    "file_pair",
]
