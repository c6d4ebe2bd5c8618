"""FastAPI application factory and configuration."""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .api import ALL_ROUTERS
from .core import (
    ALLOWED_CORS_ORIGINS,
    APP_VERSION,
    DATABASE_FILE,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
    DB_RESET,
    LEADERBOARD_SETTINGS_FILE,
    LOG_LEVEL,
    FilePair,
    LeaderboardSettings,
    configure_logging,
    initialise,
)

log = structlog.get_logger()


def create_app(
    database_file: Optional[FilePair] = None,
    leaderboard_settings_file: Optional[FilePair] = None,
    *,
    pool_size: Optional[int] = None,
    pool_timeout: Optional[float] = None,
) -> FastAPI:
    """Build the API.

    The connection pool and the leaderboard settings are opened when the app
    starts up and stored on ``app.state``; either failing aborts startup.
    """

    database_file = database_file or DATABASE_FILE
    leaderboard_settings_file = leaderboard_settings_file or LEADERBOARD_SETTINGS_FILE

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("startup", version=APP_VERSION, database=database_file[0])
        app.state.leaderboard_settings = LeaderboardSettings.load(leaderboard_settings_file)
        app.state.database = initialise(
            database_file,
            pool_size=pool_size if pool_size is not None else DB_POOL_SIZE,
            pool_timeout=pool_timeout if pool_timeout is not None else DB_POOL_TIMEOUT,
            reset=DB_RESET,
        )
        try:
            yield
        finally:
            app.state.database.dispose()
            app.state.database = None
            log.info("shutdown")

    app = FastAPI(title="Sudoku Backend API", version=APP_VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = rid
        structlog.contextvars.bind_contextvars(request_id=rid)
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()
        response.headers["X-Request-ID"] = rid
        return response

    for router in ALL_ROUTERS:
        app.include_router(router)
    return app


configure_logging(LOG_LEVEL)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sudoku_backend.app:app", host="127.0.0.1", port=8000, reload=True)
