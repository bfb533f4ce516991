"""Authentication and role DTOs (Data Transfer Objects).

Result dataclasses carried from handlers back to the presentation layer.

DTOs:
    - AuthTokens: Result of LoginUser and RefreshAccessToken
    - RegisteredUser: Result of RegisterUser
    - RoleDTO: One role with its permission codes
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.role import Role


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Credentials returned to the client.

    Attributes:
        access_token: Signed JWT (short-lived).
        refresh_token: Raw opaque refresh token (long-lived, single use).
        token_type: Always "bearer".
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 900


@dataclass(frozen=True, kw_only=True)
class RegisteredUser:
    """A freshly registered account."""

    user_id: UUID
    email: str
    username: str


@dataclass(frozen=True, kw_only=True)
class RoleDTO:
    """Role as exposed by role queries (permissions sorted)."""

    id: int
    name: str
    permissions: list[str]

    @classmethod
    def from_role(cls, role: Role) -> "RoleDTO":
        return cls(id=role.id, name=role.name, permissions=sorted(role.permissions))
