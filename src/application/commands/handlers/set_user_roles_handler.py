"""Set user roles handler.

Flow:
1. Parse actor (self, administrator, system)
2. Require a non-empty role list
3. Load user (missing -> USER_NOT_FOUND)
4. Resolve every requested role ID (any unknown -> ROLES_NOT_FOUND)
5. Replace the role set on the aggregate
6. If the set changed: persist and commit (UserRolesChanged is dispatched
   after commit and invalidates the cached permissions)

An identical set (regardless of order or duplicates) succeeds without an
event, a write or a cache invalidation.
"""

from src.application.commands.user_commands import SetUserRoles
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import RoleChangeActor
from src.domain.errors.user_error import UserError
from src.domain.protocols import UnitOfWorkFactory


class SetUserRolesHandler:
    """Handler for replacing a user's role set."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, cmd: SetUserRoles) -> Result[bool, DomainError]:
        """Handle set roles command.

        Returns:
            Success(True) if the role set changed, Success(False) if unchanged.
            Failure(ValidationError) for an invalid actor or empty role list.
            Failure(NotFoundError) for an unknown user or role IDs.
        """
        try:
            actor = RoleChangeActor(cmd.actor)
        except ValueError:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ROLE_CHANGE_ACTOR,
                    message=UserError.INVALID_ACTOR,
                    field="actor",
                )
            )

        requested_ids = set(cmd.role_ids)
        if not requested_ids:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.ROLE_IDS_REQUIRED,
                    message=UserError.ROLE_IDS_REQUIRED,
                    field="role_ids",
                )
            )

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(cmd.user_id)
            if user is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message=UserError.USER_NOT_FOUND,
                        resource_type="User",
                        resource_id=str(cmd.user_id),
                    )
                )

            roles = await uow.roles.get_by_ids(requested_ids)
            missing = requested_ids - {role.id for role in roles}
            if missing:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ROLES_NOT_FOUND,
                        message=UserError.ROLES_NOT_FOUND,
                        resource_type="Role",
                        resource_id=",".join(str(i) for i in sorted(missing)),
                    )
                )

            changed = user.set_roles(roles, actor)
            if changed:
                await uow.users.update(user)
                await uow.commit()

        return Success(value=changed)
