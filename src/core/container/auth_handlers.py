"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Login (email + password -> token pair)
- Refresh token rotation
- Logout (single refresh token revocation)

Handlers are cheap to build; the services they receive are app-scoped
singletons and each command opens its own unit of work.
"""

from typing import TYPE_CHECKING

from src.core.container.infrastructure import (
    get_clock,
    get_password_service,
    get_refresh_token_generator,
    get_token_service,
    get_uow_factory,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.revoke_refresh_token_handler import (
        RevokeRefreshTokenHandler,
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_login_user_handler() -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Usage:
        # Presentation Layer (FastAPI endpoint)
        handler: LoginUserHandler = Depends(get_login_user_handler)
        result = await handler.handle(LoginUser(...))
    """
    from src.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )

    return LoginUserHandler(
        uow_factory=get_uow_factory(),
        password_service=get_password_service(),
        token_service=get_token_service(),
        refresh_token_generator=get_refresh_token_generator(),
        clock=get_clock(),
    )


async def get_refresh_token_handler() -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )

    return RefreshAccessTokenHandler(
        uow_factory=get_uow_factory(),
        token_service=get_token_service(),
        refresh_token_generator=get_refresh_token_generator(),
        clock=get_clock(),
    )


async def get_revoke_refresh_token_handler() -> "RevokeRefreshTokenHandler":
    """Get RevokeRefreshToken command handler (request-scoped)."""
    from src.application.commands.handlers.revoke_refresh_token_handler import (
        RevokeRefreshTokenHandler,
    )

    return RevokeRefreshTokenHandler(
        uow_factory=get_uow_factory(),
        refresh_token_generator=get_refresh_token_generator(),
        clock=get_clock(),
    )
