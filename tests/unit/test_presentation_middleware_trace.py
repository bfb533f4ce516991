"""Unit tests for TraceMiddleware.

Tests cover:
- Trace ID generated (UUID) or taken from X-Trace-Id
- Trace ID exposed on request.state and through get_trace_id() during the
  request, cleared afterwards
- X-Trace-Id response header
- Exceptions propagate and the context is still reset
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def make_request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    return request


def make_response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


@pytest.mark.unit
class TestTraceMiddleware:
    """Test trace ID propagation."""

    @pytest.mark.asyncio
    async def test_generates_trace_id_when_missing(self):
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(return_value=make_response())

        response = await middleware.dispatch(make_request(), call_next)

        UUID(response.headers["X-Trace-Id"])

    @pytest.mark.asyncio
    async def test_uses_incoming_trace_id(self):
        middleware = TraceMiddleware(app=MagicMock())
        request = make_request({"X-Trace-Id": "trace-123"})
        call_next = AsyncMock(return_value=make_response())

        response = await middleware.dispatch(request, call_next)

        assert response.headers["X-Trace-Id"] == "trace-123"
        assert request.state.trace_id == "trace-123"

    @pytest.mark.asyncio
    async def test_trace_id_visible_during_request_only(self):
        # Arrange
        seen: dict[str, object] = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            seen["log_context"] = structlog.contextvars.get_contextvars().get(
                "trace_id"
            )
            return make_response()

        middleware = TraceMiddleware(app=MagicMock())

        # Act
        await middleware.dispatch(make_request({"X-Trace-Id": "abc"}), call_next)

        # Assert
        assert seen == {"trace_id": "abc", "log_context": "abc"}
        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    @pytest.mark.asyncio
    async def test_exception_propagates_and_context_resets(self):
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await middleware.dispatch(make_request(), call_next)

        assert get_trace_id() is None

    def test_get_trace_id_outside_request(self):
        assert get_trace_id() is None
