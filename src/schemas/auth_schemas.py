"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/login          - Email + password -> token pair
    POST /api/v1/auth/refresh-token  - Rotate refresh token -> token pair
    POST /api/v1/auth/logout         - Revoke one refresh token
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Returns: 200 OK with TokenPairResponse
    """

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User's password",
    )
    device_id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Opaque client device identifier; the refresh token is bound to it",
        examples=["ios-7f3a9c"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123!",
                "device_id": "ios-7f3a9c",
            }
        }
    )


# =============================================================================
# Refresh
# =============================================================================


class RefreshTokenRequest(BaseModel):
    """Request schema for refresh token rotation.

    POST /api/v1/auth/refresh-token
    Returns: 200 OK with TokenPairResponse
    """

    refresh_token: str = Field(
        ...,
        min_length=1,
        max_length=512,
        description="Refresh token from login or a previous refresh",
    )
    device_id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Device the refresh token was issued to",
    )


class TokenPairResponse(BaseModel):
    """Access/refresh token pair (login and refresh)."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token (single use)")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(
        ...,
        description="Access token lifetime in seconds",
        examples=[900],
    )


# =============================================================================
# Logout
# =============================================================================


class LogoutRequest(BaseModel):
    """Request schema for logout (refresh token revocation).

    POST /api/v1/auth/logout
    Returns: 204 No Content (also when the token is unknown or already retired)
    """

    refresh_token: str = Field(
        ...,
        min_length=1,
        max_length=512,
        description="Refresh token to revoke",
    )
