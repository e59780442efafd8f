"""Unit tests for ErrorResponseBuilder (RFC 9457 problem details)."""

import json
from unittest.mock import Mock

import pytest

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


def _request(path="/auth/login"):
    request = Mock()
    request.url.path = path
    return request


@pytest.mark.unit
class TestStatusCodeMapping:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (ValidationError(code=ErrorCode.INVALID_ROLE, message="m"), 400),
            (
                ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS, message="m", resource_type="Account"
                ),
                400,
            ),
            (
                NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message="m",
                    resource_type="Account",
                    resource_id="x",
                ),
                404,
            ),
            (AuthenticationError(code=ErrorCode.INVALID_CREDENTIALS, message="m"), 400),
            (AuthenticationError(code=ErrorCode.INVALID_OTP, message="m"), 400),
            (AuthenticationError(code=ErrorCode.EMAIL_NOT_VERIFIED, message="m"), 401),
            (AuthenticationError(code=ErrorCode.TOKEN_EXPIRED, message="m"), 401),
            (AuthorizationError(code=ErrorCode.SELF_PROMOTION_DENIED, message="m"), 400),
            (AuthorizationError(code=ErrorCode.PERMISSION_DENIED, message="m"), 403),
            (DomainError(code=ErrorCode.INTERNAL_ERROR, message="m"), 500),
        ],
    )
    def test_default_status(self, error, expected):
        assert ErrorResponseBuilder.get_status_code(error) == expected

    def test_route_override_wins(self):
        error = AuthenticationError(code=ErrorCode.INVALID_OTP, message="Otp is not valid")

        status_code = ErrorResponseBuilder.get_status_code(
            error, {ErrorCode.INVALID_OTP: 404}
        )

        assert status_code == 404


@pytest.mark.unit
class TestProblemDetailsBody:
    def test_body_fields(self):
        error = AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS, message="Wrong password"
        )

        response = ErrorResponseBuilder.from_domain_error(
            error=error, request=_request(), trace_id="trace-123"
        )

        assert response.status_code == 400
        assert response.media_type == "application/problem+json"
        body = json.loads(response.body)
        assert body["detail"] == "Wrong password"
        assert body["status"] == 400
        assert body["title"] == "Authentication Failed"
        assert body["instance"] == "/auth/login"
        assert body["trace_id"] == "trace-123"
        assert body["type"].endswith("/errors/invalid_credentials")
        assert "errors" not in body

    def test_validation_error_lists_field(self):
        error = ValidationError(
            code=ErrorCode.MISSING_FIELD,
            message="image is required for CEO accounts",
            field="image",
        )

        response = ErrorResponseBuilder.from_domain_error(
            error=error, request=_request("/auth/register"), trace_id=None
        )

        body = json.loads(response.body)
        assert body["errors"] == [
            {
                "field": "image",
                "code": "missing_field",
                "message": "image is required for CEO accounts",
            }
        ]
        assert "trace_id" not in body
