"""API package."""

from .scopes import router as scopes_router
from .diagnostics import router as diagnostics_router

__all__ = ["scopes_router", "diagnostics_router"]
