"""JWT authentication and permission dependencies.

FastAPI dependencies that validate the bearer access token and resolve the
caller's permissions per request. Permissions are never read from the token:
they come from PermissionService (cache first, role store on miss), so a role
change takes effect as soon as the cached set is invalidated.

Usage:
    # Authenticated route
    @router.get("/me")
    async def me(principal: Principal = Depends(get_current_principal)):
        return {"user_id": str(principal.user_id)}

    # Permission-guarded route (403 when missing)
    @router.get("/roles")
    async def list_roles(
        _: Principal = Depends(require_permission(Permission.ROLES_READ)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_permission_service, get_token_service
from src.core.result import Failure, Success
from src.domain.enums import Permission
from src.domain.protocols import AuthorizationProtocol, TokenGenerationProtocol

# auto_error=False so a missing header gets our own 401 (HTTPBearer's is 403)
bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True, slots=True, kw_only=True)
class Principal:
    """Authenticated caller.

    Attributes:
        user_id: Subject of the access token.
        permissions: Permission codes resolved for this request.
        token_jti: JWT unique identifier, when present.
    """

    user_id: UUID
    permissions: frozenset[str]
    token_jti: str | None = None

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


async def get_current_principal(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    authorization: Annotated[
        AuthorizationProtocol, Depends(get_permission_service)
    ],
) -> Principal:
    """Validate the bearer token and resolve the caller's permissions.

    Raises:
        HTTPException 401: Missing, invalid or expired token, or a token
            whose subject is not a UUID.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers=_UNAUTHORIZED_HEADERS,
        )

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                user_id = UUID(str(payload["sub"]))
            except (KeyError, ValueError) as e:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid token payload",
                    headers=_UNAUTHORIZED_HEADERS,
                ) from e
            jti_raw = payload.get("jti")
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error.message,
                headers=_UNAUTHORIZED_HEADERS,
            )

    permissions = await authorization.get_user_permissions(user_id)
    return Principal(
        user_id=user_id,
        permissions=permissions,
        token_jti=str(jti_raw) if jti_raw else None,
    )


def require_permission(
    permission: Permission | str,
) -> Callable[..., Awaitable[Principal]]:
    """Build a dependency that demands one permission code.

    Args:
        permission: Permission code the route requires.

    Returns:
        Dependency returning the Principal, or raising HTTPException 403.
    """
    code = permission.value if isinstance(permission, Permission) else permission

    async def _require(
        principal: Annotated[Principal, Depends(get_current_principal)],
    ) -> Principal:
        if not principal.has_permission(code):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission '{code}' required",
            )
        return principal

    return _require
