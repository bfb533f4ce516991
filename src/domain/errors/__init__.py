"""Domain errors package.

Usage:
    from src.domain.errors import InvalidTokenTransitionError, RefreshTokenError
"""

from src.domain.errors.refresh_token_error import (
    InvalidTokenTransitionError,
    RefreshTokenError,
)
from src.domain.errors.user_error import UserError

__all__ = [
    "InvalidTokenTransitionError",
    "RefreshTokenError",
    "UserError",
]
