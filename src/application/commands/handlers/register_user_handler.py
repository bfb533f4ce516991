"""Register user handler.

Flow:
1. Validate email, username and password strength (value objects)
2. Check email is not already registered
3. Hash password in a worker thread
4. Load the Member role
5. Create user (raises UserCreated) and commit
6. Return Success(RegisteredUser)

A concurrent registration with the same email that slips past step 2 is
stopped at commit by the unique index on lower(email); the IntegrityError
is reported as the same EMAIL_ALREADY_EXISTS conflict.
"""

import asyncio

from sqlalchemy.exc import IntegrityError

from src.application.commands.user_commands import RegisterUser
from src.application.dtos.auth_dtos import RegisteredUser
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import SystemRole
from src.domain.errors.user_error import UserError
from src.domain.protocols import PasswordHashingProtocol, UnitOfWorkFactory
from src.domain.value_objects import Email, Password, Username


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        password_service: PasswordHashingProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            uow_factory: Creates the unit of work (transaction + repositories).
            password_service: Bcrypt password hashing.
        """
        self._uow_factory = uow_factory
        self._password_service = password_service

    async def handle(self, cmd: RegisterUser) -> Result[RegisteredUser, DomainError]:
        """Handle registration command.

        Returns:
            Success(RegisteredUser) when the account was created.
            Failure(ValidationError) for invalid email, username or password.
            Failure(ConflictError) when the email is already registered.
        """
        try:
            email = Email(cmd.email)
        except ValueError as e:
            return _invalid(ErrorCode.INVALID_EMAIL, str(e), "email")
        try:
            username = Username(cmd.username)
        except ValueError as e:
            return _invalid(ErrorCode.INVALID_USERNAME, str(e), "username")
        try:
            password = Password(cmd.password)
        except ValueError as e:
            return _invalid(ErrorCode.PASSWORD_TOO_WEAK, str(e), "password")

        async with self._uow_factory() as uow:
            if await uow.users.exists_by_email(email.value):
                return _email_taken()

            member_role = await uow.roles.get_by_id(SystemRole.MEMBER)
            if member_role is None:
                # Seed data missing: deployment error, not a user outcome
                raise RuntimeError("Member role is not seeded")

            password_hash = await asyncio.to_thread(
                self._password_service.hash_password, password.value
            )
            user = User.create(
                email=email.value,
                username=username.value,
                password_hash=password_hash,
                member_role=member_role,
            )
            try:
                await uow.users.add(user)
                await uow.commit()
            except IntegrityError:
                # Lost the race on uq_users_email_lower; __aexit__ rolls back
                return _email_taken()

        return Success(
            value=RegisteredUser(
                user_id=user.id, email=user.email, username=user.username
            )
        )


def _email_taken() -> Failure[ConflictError]:
    return Failure(
        error=ConflictError(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message=UserError.EMAIL_ALREADY_EXISTS,
            resource_type="User",
            conflicting_field="email",
        )
    )


def _invalid(code: ErrorCode, message: str, field: str) -> Failure[ValidationError]:
    return Failure(error=ValidationError(code=code, message=message, field=field))
