"""API v1 routers.

Resources:
    /api/v1/auth    - Login, refresh token rotation, logout
    /api/v1/users   - Registration and role assignment
    /api/v1/roles   - Role catalogue
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.api.v1.auth import router as auth_router
from src.presentation.api.v1.roles import router as roles_router
from src.presentation.api.v1.users import router as users_router

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(auth_router)
v1_router.include_router(users_router)
v1_router.include_router(roles_router)

# Export individual routers for testing
__all__ = [
    "v1_router",
    "auth_router",
    "roles_router",
    "users_router",
]
