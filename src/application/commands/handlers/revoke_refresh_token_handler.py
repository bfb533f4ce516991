"""Revoke (logout) handler for one refresh token.

Flow:
1. Hash the presented raw token and load it with a row lock
2. Unknown or no longer Active -> nothing to do (logout is idempotent)
3. Revoke with reason "logout" and commit

Logout never triggers reuse detection: a client that logs out twice must not
revoke the user's other devices.
"""

from src.application.commands.auth_commands import RevokeRefreshToken
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.enums import RevocationReason
from src.domain.protocols import (
    ClockProtocol,
    RefreshTokenGeneratorProtocol,
    UnitOfWorkFactory,
)


class RevokeRefreshTokenHandler:
    """Handler for refresh token revocation (single device logout)."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        refresh_token_generator: RefreshTokenGeneratorProtocol,
        clock: ClockProtocol,
    ) -> None:
        self._uow_factory = uow_factory
        self._refresh_token_generator = refresh_token_generator
        self._clock = clock

    async def handle(self, cmd: RevokeRefreshToken) -> Result[bool, DomainError]:
        """Handle revoke command.

        Returns:
            Success(True) if an Active token was revoked, Success(False) if
            there was nothing to revoke.
        """
        token_hash = self._refresh_token_generator.compute_hash(cmd.refresh_token)

        async with self._uow_factory() as uow:
            token = await uow.refresh_tokens.get_by_token_hash(
                token_hash, for_update=True
            )
            if token is None or not token.is_active:
                return Success(value=False)

            token.revoke(self._clock.utc_now(), RevocationReason.LOGOUT)
            await uow.refresh_tokens.update(token)
            await uow.commit()

        return Success(value=True)
