"""External-facing routers (non-versioned application endpoints)."""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
