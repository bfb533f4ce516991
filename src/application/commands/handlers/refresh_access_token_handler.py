"""Refresh Access Token handler for User Authentication.

Flow:
1. Hash the presented raw token and load it with a row lock
2. Not found -> Failure(REFRESH_TOKEN_INVALID)
3. Not Active -> reuse signal: mark it reused, revoke every Active token of
   the user, commit, Failure(REFRESH_TOKEN_REUSED)
4. Past expiry -> mark it expired, commit, Failure(REFRESH_TOKEN_EXPIRED)
5. Device differs -> revoke it, commit, Failure(REFRESH_TOKEN_DEVICE_MISMATCH)
6. Otherwise rotate: old token becomes Rotated and points at a new Active
   token for the same user and device; commit, then return new credentials

Failure branches commit their state changes before returning the error, so
the security trail survives the rejection. Domain events raised along the way
are dispatched by the unit of work after commit.

Concurrency:
- Two refreshes racing with the same raw token serialize on the row lock.
  The loser reads the committed Rotated status and takes the reuse branch.
"""

from datetime import datetime
from uuid import UUID

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos.auth_dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import RevocationReason
from src.domain.errors.refresh_token_error import RefreshTokenError
from src.domain.protocols import (
    ClockProtocol,
    RefreshTokenGeneratorProtocol,
    TokenGenerationProtocol,
    UnitOfWorkFactory,
    UnitOfWorkProtocol,
)


class RefreshAccessTokenHandler:
    """Handler for refresh access token command.

    Implements refresh token rotation with reuse detection:
    - Every successful refresh retires the presented token (Rotated)
    - Presenting a retired token again is treated as theft and revokes the
      whole family of Active tokens for that user
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        token_service: TokenGenerationProtocol,
        refresh_token_generator: RefreshTokenGeneratorProtocol,
        clock: ClockProtocol,
    ) -> None:
        """Initialize refresh handler with dependencies.

        Args:
            uow_factory: Creates the unit of work (transaction + repositories).
            token_service: JWT access token generation.
            refresh_token_generator: Opaque refresh token generation/hashing.
            clock: Source of the current UTC time.
        """
        self._uow_factory = uow_factory
        self._token_service = token_service
        self._refresh_token_generator = refresh_token_generator
        self._clock = clock

    async def handle(self, cmd: RefreshAccessToken) -> Result[AuthTokens, DomainError]:
        """Handle refresh access token command.

        Args:
            cmd: RefreshAccessToken command.

        Returns:
            Success(AuthTokens) on successful rotation.
            Failure(AuthenticationError) with one of the REFRESH_TOKEN_* codes.
        """
        token_hash = self._refresh_token_generator.compute_hash(cmd.refresh_token)

        async with self._uow_factory() as uow:
            token = await uow.refresh_tokens.get_by_token_hash(
                token_hash, for_update=True
            )
            if token is None:
                return _rejected(ErrorCode.REFRESH_TOKEN_INVALID, RefreshTokenError.INVALID)

            now = self._clock.utc_now()

            if not token.is_active:
                token.mark_reused(now, chain_affected=True)
                await uow.refresh_tokens.update(token)
                await self._revoke_active_chain(uow, token.user_id, now)
                await uow.commit()
                return _rejected(ErrorCode.REFRESH_TOKEN_REUSED, RefreshTokenError.REUSED)

            if token.is_expired(now):
                token.mark_expired_usage(now)
                await uow.refresh_tokens.update(token)
                await uow.commit()
                return _rejected(ErrorCode.REFRESH_TOKEN_EXPIRED, RefreshTokenError.EXPIRED)

            if token.device_id != cmd.device_id:
                token.mark_device_mismatch(now, cmd.device_id)
                await uow.refresh_tokens.update(token)
                await uow.commit()
                return _rejected(
                    ErrorCode.REFRESH_TOKEN_DEVICE_MISMATCH,
                    RefreshTokenError.DEVICE_MISMATCH,
                )

            raw_token, new_hash = self._refresh_token_generator.generate()
            successor = token.rotate(
                new_token_hash=new_hash,
                new_expires_at=self._refresh_token_generator.expires_at(now),
                now=now,
            )
            await uow.refresh_tokens.update(token)
            await uow.refresh_tokens.add(successor)
            access_token = self._token_service.generate_access_token(token.user_id)
            await uow.commit()

        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=raw_token,
                expires_in=self._token_service.expires_in,
            )
        )

    async def _revoke_active_chain(
        self, uow: UnitOfWorkProtocol, user_id: UUID, now: datetime
    ) -> None:
        """Revoke every Active token of the user inside the current transaction."""
        active_tokens = await uow.refresh_tokens.get_active_by_user_id(user_id)
        for active in active_tokens:
            active.revoke(now, RevocationReason.CHAIN_COMPROMISED)
            await uow.refresh_tokens.update(active)


def _rejected(code: ErrorCode, message: str) -> Failure[AuthenticationError]:
    return Failure(error=AuthenticationError(code=code, message=message))
