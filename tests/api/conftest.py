"""API test fixtures: TestClient over the real app plus auth doubles."""

from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import (
    get_permission_service,
    get_rate_limiter,
    get_token_service,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.value_objects.rate_limit_rule import RateLimitResult
from src.main import app

VALID_TOKEN = "valid-access-token"


class StubTokenService:
    """Accepts VALID_TOKEN only, as the given subject."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id

    def validate_access_token(self, token: str):
        if token == VALID_TOKEN:
            return Success(value={"sub": str(self.user_id), "jti": "jti-1"})
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.TOKEN_INVALID,
                message="Invalid or expired access token",
            )
        )


class StubAuthorization:
    """Grants a fixed permission set to every caller."""

    def __init__(self, permissions: set[str]) -> None:
        self.permissions = frozenset(permissions)
        self.looked_up: list[UUID] = []

    async def get_user_permissions(self, user_id: UUID) -> frozenset[str]:
        self.looked_up.append(user_id)
        return self.permissions

    async def has_permission(self, user_id: UUID, permission: str) -> bool:
        return permission in self.permissions

    async def invalidate_permissions_cache(self, user_id: UUID) -> None:
        return None


class AllowAllRateLimiter:
    """Never limits; rate limiting has its own API tests."""

    async def is_allowed(self, *, endpoint: str, identifier: str) -> RateLimitResult:
        return RateLimitResult(allowed=True)


@pytest.fixture(autouse=True)
def clear_overrides():
    app.dependency_overrides[get_rate_limiter] = AllowAllRateLimiter
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def caller_id() -> UUID:
    return uuid7()


@pytest.fixture
def grant(caller_id):
    """Authenticate VALID_TOKEN as ``caller_id`` holding ``permissions``."""

    def _grant(*permissions: str) -> StubAuthorization:
        authorization = StubAuthorization(set(permissions))
        app.dependency_overrides[get_token_service] = lambda: StubTokenService(
            caller_id
        )
        app.dependency_overrides[get_permission_service] = lambda: authorization
        return authorization

    return _grant


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
