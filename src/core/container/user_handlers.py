"""User and role handler dependency factories.

Request-scoped handler instances for:
- User registration
- Role assignment
- Role queries (user roles, all roles)
"""

from typing import TYPE_CHECKING

from src.core.container.infrastructure import get_password_service, get_uow_factory

if TYPE_CHECKING:
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.set_user_roles_handler import (
        SetUserRolesHandler,
    )
    from src.application.queries.handlers.get_user_roles_handler import (
        GetUserRolesHandler,
    )
    from src.application.queries.handlers.list_roles_handler import ListRolesHandler


async def get_register_user_handler() -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped)."""
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        uow_factory=get_uow_factory(),
        password_service=get_password_service(),
    )


async def get_set_user_roles_handler() -> "SetUserRolesHandler":
    """Get SetUserRoles command handler (request-scoped)."""
    from src.application.commands.handlers.set_user_roles_handler import (
        SetUserRolesHandler,
    )

    return SetUserRolesHandler(uow_factory=get_uow_factory())


async def get_user_roles_handler() -> "GetUserRolesHandler":
    """Get GetUserRoles query handler (request-scoped)."""
    from src.application.queries.handlers.get_user_roles_handler import (
        GetUserRolesHandler,
    )

    return GetUserRolesHandler(uow_factory=get_uow_factory())


async def get_list_roles_handler() -> "ListRolesHandler":
    """Get ListRoles query handler (request-scoped)."""
    from src.application.queries.handlers.list_roles_handler import ListRolesHandler

    return ListRolesHandler(uow_factory=get_uow_factory())
