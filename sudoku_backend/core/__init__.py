"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    APP_VERSION,
    DATABASE_FILE,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
    DB_RESET,
    LEADERBOARD_SETTINGS_FILE,
    LOG_LEVEL,
    FilePair,
    file_pair,
)
from .database import (
    ROW_ID_MAX,
    DatabaseConnection,
    DatabaseInitialisationError,
    get_database_connection,
    initialise,
)
from .leaderboard import (
    LeaderboardConfig,
    LeaderboardSettings,
    LeaderboardSettingsError,
    SolutionOrdering,
    leaderboard_config,
)
from .logging_setup import configure_logging
from .time import isoformat_utc, utcnow, utcnow_seconds

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_VERSION",
    "DATABASE_FILE",
    "DB_POOL_SIZE",
    "DB_POOL_TIMEOUT",
    "DB_RESET",
    "DatabaseConnection",
    "DatabaseInitialisationError",
    "FilePair",
    "LEADERBOARD_SETTINGS_FILE",
    "LOG_LEVEL",
    "LeaderboardConfig",
    "LeaderboardSettings",
    "LeaderboardSettingsError",
    "ROW_ID_MAX",
    "SolutionOrdering",
    "configure_logging",
    "file_pair",
    "get_database_connection",
    "initialise",
    "isoformat_utc",
    "leaderboard_config",
    "utcnow",
    "utcnow_seconds",
]
