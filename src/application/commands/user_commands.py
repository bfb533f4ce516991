"""User commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Create a user account holding the Member role.

    Attributes:
        email: Email address (validated and normalized by the handler).
        username: Display username (3-50 chars, letters, digits, '_' or '-').
        password: Plaintext password (strength-checked, then hashed).
    """

    email: str
    username: str
    password: str


@dataclass(frozen=True, kw_only=True)
class SetUserRoles:
    """Replace the full role set of a user.

    Attributes:
        user_id: Target user.
        role_ids: Requested role IDs (order and duplicates irrelevant).
        actor: Who requests the change ("self", "administrator", "system").
    """

    user_id: UUID
    role_ids: list[int]
    actor: str
