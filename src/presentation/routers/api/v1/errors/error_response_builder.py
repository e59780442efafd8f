"""Error response builder for RFC 9457 Problem Details.

Converts the DomainError carried by a handler's Failure into an RFC 9457
JSON response with the matching HTTP status code.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from collections.abc import Mapping

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

PROBLEM_JSON = "application/problem+json"

# Codes whose status differs from their error class default
_CODE_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_OTP: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ACCOUNT_ALREADY_VERIFIED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SELF_PROMOTION_DENIED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_NOT_VERIFIED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_MISSING: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
}

_TYPE_STATUS: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
}

_TYPE_TITLE: dict[type[DomainError], str] = {
    ValidationError: "Validation Failed",
    ConflictError: "Resource Conflict",
    NotFoundError: "Resource Not Found",
    AuthenticationError: "Authentication Failed",
    AuthorizationError: "Access Denied",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match await handler.handle(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(
        ...             error=error,
        ...             request=request,
        ...             trace_id=get_trace_id(),
        ...             status_overrides={ErrorCode.INVALID_OTP: 404},
        ...         )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
        status_overrides: Mapping[ErrorCode, int] | None = None,
    ) -> JSONResponse:
        """Convert DomainError to RFC 9457 JSON response.

        Args:
            error: Domain error from a handler's Failure.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.
            status_overrides: Per-route status for specific error codes.

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error, status_overrides)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        # Add field-specific errors for validation failures
        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_JSON,
        )

    @staticmethod
    def get_status_code(
        error: DomainError,
        status_overrides: Mapping[ErrorCode, int] | None = None,
    ) -> int:
        """Map a domain error to an HTTP status code.

        Resolution order: route override, error code, error class, 500.

        Example:
            >>> ErrorResponseBuilder.get_status_code(
            ...     AuthenticationError(code=ErrorCode.INVALID_OTP, message="Otp is not valid"),
            ...     {ErrorCode.INVALID_OTP: 404},
            ... )
            404
        """
        if status_overrides and error.code in status_overrides:
            return status_overrides[error.code]
        if error.code in _CODE_STATUS:
            return _CODE_STATUS[error.code]
        for error_type, status_code in _TYPE_STATUS.items():
            if isinstance(error, error_type):
                return status_code
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def _get_title(error: DomainError) -> str:
        for error_type, title in _TYPE_TITLE.items():
            if isinstance(error, error_type):
                return title
        return "Internal Server Error"
