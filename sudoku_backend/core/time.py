"""Time helpers shared across models."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""

    return datetime.now(timezone.utc)


def utcnow_seconds() -> datetime:
    """Return the current UTC datetime truncated to whole seconds."""

    return utcnow().replace(microsecond=0)


def isoformat_utc(value: datetime) -> str:
    """ISO 8601 text for ``value`` in UTC.

    SQLite hands stored datetimes back without an offset; those are UTC.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


__all__ = ["isoformat_utc", "utcnow", "utcnow_seconds"]
