"""Commands (CQRS write operations) and their handlers."""

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RevokeRefreshToken,
)
from src.application.commands.user_commands import RegisterUser, SetUserRoles

__all__ = [
    "LoginUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RevokeRefreshToken",
    "SetUserRoles",
]
