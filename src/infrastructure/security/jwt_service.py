"""JWT access token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Claims:
    - sub: user id (the only identity claim)
    - iat / exp: issued-at and expiry, from the injected clock
    - jti: unique token id (UUID v7)
    - iss / aud: only when configured, and then required on validation

Permissions are deliberately absent; they are resolved per request so a role
change takes effect without waiting for access tokens to expire.
"""

from datetime import timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.clock_protocol import ClockProtocol

ALGORITHM = "HS256"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        token_service = JWTService(secret_key=settings.secret_key, clock=SystemClock())
        token = token_service.generate_access_token(user_id=user.id)
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        clock: ClockProtocol,
        expiration_minutes: int = 15,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC signing key, at least 32 bytes.
            clock: Time source for iat/exp.
            expiration_minutes: Access token lifetime.
            issuer: Optional 'iss' claim.
            audience: Optional 'aud' claim.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes or the lifetime
                is not positive.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if expiration_minutes <= 0:
            msg = "Access token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._clock = clock
        self._expiration_minutes = expiration_minutes
        self._issuer = issuer
        self._audience = audience

    @property
    def expires_in(self) -> int:
        return self._expiration_minutes * 60

    def generate_access_token(self, user_id: UUID) -> str:
        now = self._clock.utc_now()
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }
        if self._issuer:
            payload["iss"] = self._issuer
        if self._audience:
            payload["aud"] = self._audience

        token: str = jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], DomainError]:
        """Validate signature, expiry and (when configured) issuer/audience.

        Returns:
            Success(claims), or Failure(AuthenticationError) with
            ErrorCode.TOKEN_INVALID for any rejection.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": ["sub", "exp", "iat"]},
            )
        except InvalidTokenError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired access token",
                )
            )
        return Success(value=payload)
