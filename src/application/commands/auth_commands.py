"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers parse raw fields into value objects and execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange email and password for an access/refresh token pair.

    Attributes:
        email: Email address as typed by the user.
        password: Plaintext password (never logged).
        device_id: Opaque identifier of the client device; the issued
            refresh token is bound to it.
    """

    email: str
    password: str
    device_id: str


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Rotate a refresh token into a new access/refresh token pair.

    Attributes:
        refresh_token: Raw refresh token previously issued (never logged).
        device_id: Device presenting the token; must match the bound device.
    """

    refresh_token: str
    device_id: str


@dataclass(frozen=True, kw_only=True)
class RevokeRefreshToken:
    """Revoke one refresh token (logout on one device).

    Attributes:
        refresh_token: Raw refresh token to revoke.
    """

    refresh_token: str
