"""Get user roles query handler.

Returns the roles currently assigned to a user, each with its permissions.
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.dtos.auth_dtos import RoleDTO
from src.application.queries.user_queries import GetUserRoles
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors.user_error import UserError
from src.domain.protocols import UnitOfWorkFactory


@dataclass
class UserRolesResult:
    """User roles query result."""

    user_id: UUID
    roles: list[RoleDTO]


class GetUserRolesHandler:
    """Handler for reading a user's role set.

    Reads from the database (no cache; only the permission union is cached).
    """

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        """Initialize handler with dependencies.

        Args:
            uow_factory: Creates the unit of work used for the read.
        """
        self._uow_factory = uow_factory

    async def handle(self, query: GetUserRoles) -> Result[UserRolesResult, DomainError]:
        """Handle get user roles query.

        Returns:
            Success(UserRolesResult) with roles ordered by ID.
            Failure(NotFoundError) if the user does not exist.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(query.user_id)

        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message=UserError.USER_NOT_FOUND,
                    resource_type="User",
                    resource_id=str(query.user_id),
                )
            )

        roles = sorted(user.roles, key=lambda r: r.id)
        return Success(
            value=UserRolesResult(
                user_id=user.id,
                roles=[RoleDTO.from_role(role) for role in roles],
            )
        )
