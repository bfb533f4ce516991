"""List roles query handler."""

from src.application.dtos.auth_dtos import RoleDTO
from src.application.queries.user_queries import ListRoles
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import UnitOfWorkFactory


class ListRolesHandler:
    """Handler for listing every role defined in the system."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, query: ListRoles) -> Result[list[RoleDTO], DomainError]:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        return Success(value=[RoleDTO.from_role(role) for role in roles])
