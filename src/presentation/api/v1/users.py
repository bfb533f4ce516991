"""Users resource router.

Endpoints:
    POST /api/v1/users               - Register (public, rate limited per IP)
    GET  /api/v1/users/{id}/roles    - Read roles (users:roles:read)
    PUT  /api/v1/users/{id}/roles    - Replace roles (users:roles:write)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.commands.handlers.set_user_roles_handler import (
    SetUserRolesHandler,
)
from src.application.commands.user_commands import RegisterUser, SetUserRoles
from src.application.queries.handlers.get_user_roles_handler import (
    GetUserRolesHandler,
)
from src.application.queries.user_queries import GetUserRoles
from src.core.container import (
    get_register_user_handler,
    get_set_user_roles_handler,
    get_user_roles_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import Permission
from src.presentation.api.middleware.auth_dependencies import (
    Principal,
    require_permission,
)
from src.presentation.api.middleware.rate_limit_dependencies import enforce_rate_limit
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.user_schemas import (
    RoleResponse,
    SetUserRolesRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserRolesResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreateResponse,
    dependencies=[Depends(enforce_rate_limit)],
    responses={
        400: {"description": "Invalid email, username or password", "model": ProblemDetails},
        409: {"description": "Email already registered", "model": ProblemDetails},
        429: {"description": "Too many registrations", "model": ProblemDetails},
    },
    summary="Register user",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> UserCreateResponse | JSONResponse:
    """POST /api/v1/users → 201 Created."""
    result = await handler.handle(
        RegisterUser(
            email=str(data.email),
            username=data.username,
            password=data.password,
        )
    )

    match result:
        case Success(value=user):
            return UserCreateResponse(
                id=user.user_id, email=user.email, username=user.username
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/{user_id}/roles",
    response_model=UserRolesResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Get user roles",
)
async def get_user_roles(
    request: Request,
    user_id: UUID,
    _: Principal = Depends(require_permission(Permission.USERS_ROLES_READ)),
    handler: GetUserRolesHandler = Depends(get_user_roles_handler),
) -> UserRolesResponse | JSONResponse:
    """GET /api/v1/users/{user_id}/roles → 200 OK."""
    result = await handler.handle(GetUserRoles(user_id=user_id))

    match result:
        case Success(value=user_roles):
            return UserRolesResponse(
                user_id=user_roles.user_id,
                roles=[
                    RoleResponse(id=r.id, name=r.name, permissions=r.permissions)
                    for r in user_roles.roles
                ],
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.put(
    "/{user_id}/roles",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Unknown role IDs or invalid actor", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Replace user roles",
)
async def set_user_roles(
    request: Request,
    user_id: UUID,
    data: SetUserRolesRequest,
    _: Principal = Depends(require_permission(Permission.USERS_ROLES_WRITE)),
    handler: SetUserRolesHandler = Depends(get_set_user_roles_handler),
) -> Response:
    """PUT /api/v1/users/{user_id}/roles → 204 No Content."""
    result = await handler.handle(
        SetUserRoles(user_id=user_id, role_ids=data.role_ids, actor=data.actor)
    )

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error) if error.code == ErrorCode.ROLES_NOT_FOUND:
            # Unknown IDs are a bad request body, not a missing resource
            return ErrorResponseBuilder.from_domain_error(
                error, request, status_code=status.HTTP_400_BAD_REQUEST
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
