"""Login handler for User Authentication.

Flow:
1. Parse email into the Email value object (malformed -> validation error)
2. Check device_id is present
3. Find user by email (case-insensitive, soft-deleted users excluded)
4. Verify password in a worker thread (bcrypt is CPU-bound)
5. Generate JWT access token (subject = user id, no permission claims)
6. Issue an opaque refresh token bound to the device
7. Persist the refresh token and commit (RefreshTokenCreated is dispatched
   after commit; its subscriber sweeps the user's expired tokens)
8. Return Success(AuthTokens)

Unknown email and wrong password both fail with INVALID_CREDENTIALS so the
caller cannot tell which accounts exist.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are reached through the unit of work)
"""

import asyncio

from src.application.commands.auth_commands import LoginUser
from src.application.dtos.auth_dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.refresh_token import RefreshToken
from src.domain.errors.user_error import UserError
from src.domain.protocols import (
    ClockProtocol,
    PasswordHashingProtocol,
    RefreshTokenGeneratorProtocol,
    TokenGenerationProtocol,
    UnitOfWorkFactory,
)
from src.domain.value_objects import Email


class LoginUserHandler:
    """Handler for user login command.

    Login never touches the user's existing refresh tokens: every successful
    login starts one more independent chain for the given device.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        refresh_token_generator: RefreshTokenGeneratorProtocol,
        clock: ClockProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            uow_factory: Creates the unit of work (transaction + repositories).
            password_service: Bcrypt password verification.
            token_service: JWT access token generation.
            refresh_token_generator: Opaque refresh token generation/hashing.
            clock: Source of the current UTC time.
        """
        self._uow_factory = uow_factory
        self._password_service = password_service
        self._token_service = token_service
        self._refresh_token_generator = refresh_token_generator
        self._clock = clock

    async def handle(self, cmd: LoginUser) -> Result[AuthTokens, DomainError]:
        """Handle login command.

        Args:
            cmd: LoginUser command.

        Returns:
            Success(AuthTokens) on successful login.
            Failure(ValidationError) for a malformed email or missing device.
            Failure(AuthenticationError) for unknown email or wrong password.
        """
        try:
            email = Email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL,
                    message=str(e),
                    field="email",
                )
            )

        if not cmd.device_id or not cmd.device_id.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_DEVICE_ID,
                    message="Device ID is required",
                    field="device_id",
                )
            )

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email.value)
            if user is None or not user.can_authenticate:
                return Failure(error=_invalid_credentials())

            password_ok = await asyncio.to_thread(
                self._password_service.verify_password,
                cmd.password,
                user.password_hash,
            )
            if not password_ok:
                return Failure(error=_invalid_credentials())

            now = self._clock.utc_now()
            access_token = self._token_service.generate_access_token(user.id)
            raw_token, token_hash = self._refresh_token_generator.generate()

            refresh_token = RefreshToken.issue(
                token_hash=token_hash,
                user_id=user.id,
                device_id=cmd.device_id,
                expires_at=self._refresh_token_generator.expires_at(now),
            )
            await uow.refresh_tokens.add(refresh_token)
            await uow.commit()

        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=raw_token,
                expires_in=self._token_service.expires_in,
            )
        )


def _invalid_credentials() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=UserError.INVALID_CREDENTIALS,
    )
