"""Access token generation protocol for domain layer.

Token Strategy:
    - Access tokens: short-lived JWT carrying only the user id as subject
    - Refresh tokens: long-lived opaque tokens (RefreshTokenGeneratorProtocol)
    - Permissions are never embedded in the access token; they are resolved
      per request through the permission cache
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 (src/infrastructure/security/jwt_service.py)

    Usage:
        token = token_service.generate_access_token(user_id=user.id)

        match token_service.validate_access_token(token):
            case Success(value=claims):
                user_id = UUID(claims["sub"])
            case Failure(error=error):
                ...
    """

    @property
    def expires_in(self) -> int:
        """Access token lifetime in seconds."""
        ...

    def generate_access_token(self, user_id: UUID) -> str:
        """Generate a signed access token whose subject is ``user_id``."""
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], DomainError]:
        """Verify signature and expiry and return the decoded claims.

        Returns:
            Success(claims) for a valid token, Failure(AuthenticationError)
            for an invalid, expired or tampered one.
        """
        ...
