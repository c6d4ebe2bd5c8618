"""Structured JSON logging for the API process."""

from __future__ import annotations

import logging
import sys

import structlog
import structlog.stdlib

SERVICE_NAME = "sudoku-backend"


def resolve_level(level: str) -> int:
    """Numeric logging level for a name such as ``"debug"``; unknown names give INFO."""

    numeric = logging.getLevelName((level or "").strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _add_service(_, __, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: str = "INFO") -> int:
    """Send structlog events and stdlib records (uvicorn, SQLAlchemy) to stdout
    as JSON lines, filtered at ``level``. Returns the numeric level applied."""

    numeric_level = resolve_level(level)
    shared = [
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.add_log_level,
        _add_service,
        structlog.processors.EventRenamer("message"),
    ]

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, *shared, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared,
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)
    return numeric_level


__all__ = ["SERVICE_NAME", "configure_logging", "resolve_level"]
