"""Password reset router.

Endpoints:
    POST /password/request-reset  - Send a password reset passcode by email
    POST /password/reset-password - Set a new password with the passcode
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import RequestPasswordReset, ResetPassword
from src.application.commands.handlers import (
    RequestPasswordResetHandler,
    ResetPasswordHandler,
)
from src.core.container import (
    get_request_password_reset_handler,
    get_reset_password_handler,
)
from src.core.result import Failure, Success
from src.core.trace_context import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    MessageResponse,
    PasswordResetRequest,
    ResetPasswordRequest,
)

router = APIRouter(prefix="/password", tags=["Password Resets"])

PASSWORD_SET_MESSAGE = "New password set successfully"


@router.post(
    "/request-reset",
    response_model=MessageResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Request password reset",
)
async def request_reset(
    request: Request,
    data: PasswordResetRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> MessageResponse | JSONResponse:
    """Send a password reset passcode to the account's email.

    POST /password/request-reset → 200 OK
    """
    match await handler.handle(RequestPasswordReset(email=data.email)):
        case Success(value=account):
            return MessageResponse(
                message=(
                    f"{account.name}, an OTP has been sent to your email "
                    f"({account.email}). Please check and confirm it!"
                )
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    responses={
        400: {"description": "Passcode invalid", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Reset password",
)
async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> MessageResponse | JSONResponse:
    """Set a new password after confirming the reset passcode.

    POST /password/reset-password → 200 OK
    """
    command = ResetPassword(
        email=data.email,
        new_password=data.new_password,
        otp=data.otp,
    )
    match await handler.handle(command):
        case Success(value=_):
            return MessageResponse(message=PASSWORD_SET_MESSAGE)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )
