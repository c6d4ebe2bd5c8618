"""HTTP API routers."""

from .routers import ALL_ROUTERS

__all__ = ["ALL_ROUTERS"]
