"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Request

from ...core import APP_VERSION, LeaderboardSettings

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness check."""

    return {"ok": True}


@router.get("/config")
def get_config(request: Request) -> Dict[str, Any]:
    """Expose the active leaderboard bounds to the frontend."""

    settings = getattr(request.app.state, "leaderboard_settings", None) or LeaderboardSettings.builtin()
    return {
        "version": APP_VERSION,
        "leaderboard": settings.model_dump(mode="json"),
    }


__all__ = ["router"]
