"""API routers.

All routers are mounted under ``settings.api_prefix`` (empty by default).

Resources:
    /auth      - Registration, verification, login, token refresh
    /password  - Password reset
    /user      - Account administration and self-service
    /region    - Regions
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.auth import router as auth_router
from src.presentation.routers.api.v1.password_resets import (
    router as password_resets_router,
)
from src.presentation.routers.api.v1.regions import router as regions_router
from src.presentation.routers.api.v1.users import router as users_router

api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(auth_router)
api_router.include_router(password_resets_router)
api_router.include_router(users_router)
api_router.include_router(regions_router)

__all__ = [
    "api_router",
]
