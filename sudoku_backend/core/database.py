"""Database pool setup and the per-request connection guard."""

from __future__ import annotations

from typing import Iterator

import structlog
from fastapi import HTTPException, Request, status
from sqlalchemy import event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError, TimeoutError as PoolTimeoutError
from sqlalchemy.pool import QueuePool
from sqlmodel import Session, SQLModel, create_engine

from .config import FilePair

log = structlog.get_logger()

# Largest id SQLite can store in an INTEGER PRIMARY KEY.
ROW_ID_MAX = 2**63 - 1


class DatabaseInitialisationError(RuntimeError):
    """The database pool could not be opened or its schema created."""


def database_url(db_file: FilePair) -> str:
    """SQLite URL for the configured file, with forward-slash separators."""

    return "sqlite:///" + str(db_file[1]).replace("\\", "/")


def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def initialise(
    db_file: FilePair,
    *,
    pool_size: int = 5,
    pool_timeout: float = 5.0,
    reset: bool = False,
) -> Engine:
    """Open a bounded connection pool on ``db_file`` and create the schema.

    The schema is created eagerly on one pooled connection before the pool is
    handed back, so a broken database file fails here rather than on the
    first request. With ``reset`` every table is dropped first.

    Raises :class:`DatabaseInitialisationError` on failure.
    """

    from .. import models  # noqa: F401 - register tables with SQLModel

    label, path = db_file
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            database_url(db_file),
            poolclass=QueuePool,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", _enable_foreign_keys)
        with engine.begin() as connection:
            if reset:
                SQLModel.metadata.drop_all(connection)
            SQLModel.metadata.create_all(connection)
    except (OSError, SQLAlchemyError) as exc:
        raise DatabaseInitialisationError(f"Failed to open database {label}: {exc}") from exc

    log.info("database_initialised", file=label, pool_size=pool_size)
    return engine


class DatabaseConnection:
    """Exclusive access to one pooled connection for the span of a request.

    Route handlers take this as a dependency and call :meth:`session` for the
    unit of work bound to the checked-out connection. The connection goes
    back to the pool when the request finishes.
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection
        self._session = Session(bind=connection)

    def session(self) -> Session:
        return self._session

    def close(self) -> None:
        self._session.close()
        self._connection.close()


def get_database_connection(request: Request) -> Iterator[DatabaseConnection]:
    """Check a connection out of the pool registered on the app.

    Fails with 500 when no pool was registered at startup, and with 503 when
    the pool cannot hand out a connection.
    """

    engine = getattr(request.app.state, "database", None)
    if engine is None:
        log.error("database_pool_missing", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database not configured",
        )

    try:
        connection = engine.connect()
    except (PoolTimeoutError, DBAPIError) as exc:
        log.warning("database_pool_unavailable", path=request.url.path, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No database connection available",
        ) from exc

    db = DatabaseConnection(connection)
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "ROW_ID_MAX",
    "DatabaseConnection",
    "DatabaseInitialisationError",
    "database_url",
    "get_database_connection",
    "initialise",
]
