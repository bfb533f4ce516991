"""Roles resource router.

Endpoints:
    GET /api/v1/roles - List roles (roles:read)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.list_roles_handler import ListRolesHandler
from src.application.queries.user_queries import ListRoles
from src.core.container import get_list_roles_handler
from src.core.result import Failure, Success
from src.domain.enums import Permission
from src.presentation.api.middleware.auth_dependencies import (
    Principal,
    require_permission,
)
from src.presentation.api.v1.errors import ErrorResponseBuilder
from src.schemas.user_schemas import RoleListResponse, RoleResponse

router = APIRouter(prefix="/roles", tags=["Roles"])


@router.get("", response_model=RoleListResponse, summary="List roles")
async def list_roles(
    request: Request,
    _: Principal = Depends(require_permission(Permission.ROLES_READ)),
    handler: ListRolesHandler = Depends(get_list_roles_handler),
) -> RoleListResponse | JSONResponse:
    """GET /api/v1/roles → 200 OK."""
    result = await handler.handle(ListRoles())

    match result:
        case Success(value=roles):
            return RoleListResponse(
                roles=[
                    RoleResponse(id=r.id, name=r.name, permissions=r.permissions)
                    for r in roles
                ],
                total_count=len(roles),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
