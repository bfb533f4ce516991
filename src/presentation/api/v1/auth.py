"""Auth resource router.

Endpoints:
    POST /api/v1/auth/login          - Exchange credentials for a token pair
    POST /api/v1/auth/refresh-token  - Rotate a refresh token
    POST /api/v1/auth/logout         - Revoke a refresh token

Every refresh failure (unknown, expired, reused, wrong device) is returned as
the same 401 so a client cannot tell which check failed. The specific reason
is visible only in the security log.

Login and refresh are rate limited per client IP (429 with Retry-After).
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RevokeRefreshToken,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.revoke_refresh_token_handler import (
    RevokeRefreshTokenHandler,
)
from src.core.container import (
    get_login_user_handler,
    get_refresh_token_handler,
    get_revoke_refresh_token_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.presentation.api.middleware.rate_limit_dependencies import enforce_rate_limit
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    LoginRequest,
    LogoutRequest,
    RefreshTokenRequest,
    TokenPairResponse,
)

router = APIRouter(prefix="/auth", tags=["Auth"])

REFRESH_FAILED_DETAIL = "Invalid or expired refresh token"
_WWW_AUTHENTICATE = {"WWW-Authenticate": "Bearer"}


@router.post(
    "/login",
    response_model=TokenPairResponse,
    dependencies=[Depends(enforce_rate_limit)],
    responses={
        400: {"description": "Malformed input", "model": ProblemDetails},
        401: {"description": "Invalid credentials", "model": ProblemDetails},
        429: {"description": "Too many login attempts", "model": ProblemDetails},
    },
    summary="Log in",
    description="Authenticate with email and password; issues a refresh token bound to device_id.",
)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> TokenPairResponse | JSONResponse:
    """POST /api/v1/auth/login → 200 OK."""
    result = await handler.handle(
        LoginUser(
            email=str(data.email),
            password=data.password,
            device_id=data.device_id,
        )
    )

    match result:
        case Success(value=tokens):
            return TokenPairResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                token_type=tokens.token_type,
                expires_in=tokens.expires_in,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error, request, headers=_WWW_AUTHENTICATE
            )


@router.post(
    "/refresh-token",
    response_model=TokenPairResponse,
    dependencies=[Depends(enforce_rate_limit)],
    responses={
        401: {"description": "Invalid or expired refresh token", "model": ProblemDetails},
        429: {"description": "Too many refresh requests", "model": ProblemDetails},
    },
    summary="Refresh tokens",
    description="Rotate a refresh token. The presented token can never be used again.",
)
async def refresh_token(
    request: Request,
    data: RefreshTokenRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_token_handler),
) -> TokenPairResponse | JSONResponse:
    """POST /api/v1/auth/refresh-token → 200 OK."""
    result = await handler.handle(
        RefreshAccessToken(refresh_token=data.refresh_token, device_id=data.device_id)
    )

    match result:
        case Success(value=tokens):
            return TokenPairResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                token_type=tokens.token_type,
                expires_in=tokens.expires_in,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error,
                request,
                status_code=status.HTTP_401_UNAUTHORIZED,
                code=ErrorCode.REFRESH_TOKEN_INVALID,
                detail=REFRESH_FAILED_DETAIL,
                headers=_WWW_AUTHENTICATE,
            )


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Log out",
    description="Revoke a refresh token. Idempotent: unknown or retired tokens also return 204.",
)
async def logout(
    request: Request,
    data: LogoutRequest,
    handler: RevokeRefreshTokenHandler = Depends(get_revoke_refresh_token_handler),
) -> Response:
    """POST /api/v1/auth/logout → 204 No Content."""
    result = await handler.handle(RevokeRefreshToken(refresh_token=data.refresh_token))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
