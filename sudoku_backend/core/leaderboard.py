"""Leaderboard request configuration and its file-loaded bounds."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional

import structlog
import toml
from fastapi import Query, Request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import FilePair

log = structlog.get_logger()


class SolutionOrdering(str, Enum):
    """How leaderboard entries are ordered."""

    DEFAULT = "default"
    FASTEST = "fastest"
    NEWEST = "newest"
    OLDEST = "oldest"


class LeaderboardConfig(BaseModel):
    """Configuration of a leaderboard request.

    Equality takes both fields into account, but ordering comparisons only
    look at ``count``: two configs asking for the same number of rows in a
    different order are neither less nor greater than one another.
    """

    model_config = ConfigDict(frozen=True)

    # How many entries to return
    count: int = Field(ge=0)
    # How to order the returned entries
    ordering: SolutionOrdering = SolutionOrdering.DEFAULT

    DEFAULT_DEFAULT: ClassVar["LeaderboardConfig"]
    DEFAULT_MAX: ClassVar["LeaderboardConfig"]

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LeaderboardConfig):
            return NotImplemented
        return self.count < other.count

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LeaderboardConfig):
            return NotImplemented
        return self.count <= other.count

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LeaderboardConfig):
            return NotImplemented
        return self.count > other.count

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LeaderboardConfig):
            return NotImplemented
        return self.count >= other.count

    @classmethod
    def from_form(
        cls,
        count: Optional[int],
        ordering: Optional[SolutionOrdering],
        default: "LeaderboardConfig",
    ) -> "LeaderboardConfig":
        """Back-fill absent request fields from ``default``, independently."""

        return cls(
            count=default.count if count is None else count,
            ordering=default.ordering if ordering is None else ordering,
        )

    def clamp(self, maximum: "LeaderboardConfig") -> "LeaderboardConfig":
        """Return this config with ``count`` capped at ``maximum.count``."""

        if self > maximum:
            return self.model_copy(update={"count": maximum.count})
        return self


LeaderboardConfig.DEFAULT_DEFAULT = LeaderboardConfig(count=10, ordering=SolutionOrdering.DEFAULT)
LeaderboardConfig.DEFAULT_MAX = LeaderboardConfig(count=42, ordering=SolutionOrdering.DEFAULT)


class LeaderboardSettingsError(RuntimeError):
    """The leaderboard settings file could not be loaded."""


class LeaderboardSettings(BaseModel):
    """Amalgam of the default and maximal leaderboard configurations."""

    model_config = ConfigDict(frozen=True)

    # Default config to backfill from
    default: LeaderboardConfig
    # Unexceedable config
    max: LeaderboardConfig

    @classmethod
    def builtin(cls) -> "LeaderboardSettings":
        return cls(default=LeaderboardConfig.DEFAULT_DEFAULT, max=LeaderboardConfig.DEFAULT_MAX)

    @classmethod
    def load(cls, settings_file: FilePair) -> "LeaderboardSettings":
        """Load the settings from the TOML file at ``settings_file``.

        The file must contain ``[default]`` and ``[max]`` tables, each with
        ``count`` and ``ordering`` keys. Raises :class:`LeaderboardSettingsError`
        on any failure; the message tells opening, reading and parsing apart.
        """

        label, path = settings_file
        try:
            handle = open(path, "r", encoding="utf-8")
        except OSError as exc:
            raise LeaderboardSettingsError(
                f"Couldn't open leaderboard settings file: {label}: {exc}"
            ) from exc

        with handle:
            try:
                raw = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                raise LeaderboardSettingsError(
                    f"Couldn't read leaderboard settings file: {label}: {exc}"
                ) from exc

        try:
            settings = cls.model_validate(toml.loads(raw))
        except (toml.TomlDecodeError, ValidationError) as exc:
            raise LeaderboardSettingsError(
                f"Failed to parse leaderboard settings: {label}: {exc}"
            ) from exc

        log.info(
            "leaderboard_settings_loaded",
            file=label,
            default_count=settings.default.count,
            max_count=settings.max.count,
        )
        return settings


def leaderboard_config(
    request: Request,
    count: Optional[int] = Query(None, ge=0),
    ordering: Optional[SolutionOrdering] = Query(None),
) -> LeaderboardConfig:
    """FastAPI dependency decoding a leaderboard request's form fields.

    Absent fields come from the process-wide default config; the result is
    capped by the process-wide maximum.
    """

    settings = getattr(request.app.state, "leaderboard_settings", None)
    if settings is None:
        settings = LeaderboardSettings.builtin()
    return LeaderboardConfig.from_form(count, ordering, settings.default).clamp(settings.max)


__all__ = [
    "LeaderboardConfig",
    "LeaderboardSettings",
    "LeaderboardSettingsError",
    "SolutionOrdering",
    "leaderboard_config",
]
