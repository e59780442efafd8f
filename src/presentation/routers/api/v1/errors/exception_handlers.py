"""Global exception handlers for FastAPI application.

Converts exceptions that escape the routers into RFC 9457 Problem Details:

- RequestValidationError: 400 with one ErrorDetail per offending field
- HTTPException (raised by the access gate dependencies): its own status
- Any other exception: logged with full detail, 500 with a generic message

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.core.trace_context import get_trace_id
from src.presentation.routers.api.v1.errors.error_response_builder import PROBLEM_JSON
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def _trace_id(request: Request) -> str | None:
    # Context var is unset once TraceMiddleware has unwound (500 path)
    return get_trace_id() or getattr(request.state, "trace_id", None)


def _field_name(location: tuple[int | str, ...]) -> str:
    parts = [str(part) for part in location if part != "body"]
    return ".".join(parts) or "body"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request body/query validation failures (400)."""
    errors = [
        ErrorDetail(
            field=_field_name(tuple(error.get("loc", ()))),
            code=str(error.get("type", "value_error")),
            message=str(error.get("msg", "Invalid value")),
        )
        for error in exc.errors()
    ]
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation_failed",
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        detail=errors[0].message if len(errors) == 1 else "Request validation failed",
        instance=str(request.url.path),
        errors=errors,
        trace_id=_trace_id(request),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_JSON,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPException as problem details, keeping its headers."""
    title = HTTPStatus(exc.status_code).phrase
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{title.lower().replace(' ', '_')}",
        title=title,
        status=exc.status_code,
        detail=str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=_trace_id(request),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_JSON,
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Prevents leaking stack traces or internal details to API consumers; the
    full exception goes to the log together with the trace id.
    """
    trace_id = _trace_id(request)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal_error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=UNEXPECTED_ERROR_MESSAGE,
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_JSON,
        headers={"X-Trace-Id": trace_id} if trace_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
