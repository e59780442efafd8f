"""Unit tests for TraceMiddleware and the trace context."""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest

from src.core.trace_context import get_trace_id
from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
)


def _request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    return request


@pytest.mark.unit
class TestTraceMiddleware:
    @pytest.mark.asyncio
    async def test_generates_trace_id_when_missing(self):
        # Arrange
        response = MagicMock()
        response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())

        # Act
        result = await middleware.dispatch(_request({}), AsyncMock(return_value=response))

        # Assert
        UUID(result.headers[TRACE_HEADER])

    @pytest.mark.asyncio
    async def test_reuses_incoming_trace_id(self):
        request = _request({TRACE_HEADER: "abc-123"})
        response = MagicMock()
        response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())

        result = await middleware.dispatch(request, AsyncMock(return_value=response))

        assert result.headers[TRACE_HEADER] == "abc-123"
        assert request.state.trace_id == "abc-123"

    @pytest.mark.asyncio
    async def test_trace_id_visible_inside_request_only(self):
        seen: list[str | None] = []
        response = MagicMock()
        response.headers = {}

        async def call_next(request):
            seen.append(get_trace_id())
            return response

        middleware = TraceMiddleware(app=MagicMock())

        await middleware.dispatch(_request({TRACE_HEADER: "req-1"}), call_next)

        assert seen == ["req-1"]
        assert get_trace_id() is None

    @pytest.mark.asyncio
    async def test_context_reset_when_handler_raises(self):
        middleware = TraceMiddleware(app=MagicMock())

        with pytest.raises(RuntimeError):
            await middleware.dispatch(
                _request({TRACE_HEADER: "req-2"}),
                AsyncMock(side_effect=RuntimeError("boom")),
            )

        assert get_trace_id() is None
