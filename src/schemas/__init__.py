"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, TokenPairResponse
"""

from src.schemas.auth_schemas import (
    LoginRequest,
    LogoutRequest,
    RefreshTokenRequest,
    TokenPairResponse,
)
from src.schemas.user_schemas import (
    RoleListResponse,
    RoleResponse,
    SetUserRolesRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserRolesResponse,
)

__all__ = [
    "LoginRequest",
    "LogoutRequest",
    "RefreshTokenRequest",
    "TokenPairResponse",
    "RoleListResponse",
    "RoleResponse",
    "SetUserRolesRequest",
    "UserCreateRequest",
    "UserCreateResponse",
    "UserRolesResponse",
]
