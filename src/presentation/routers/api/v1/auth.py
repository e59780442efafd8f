"""Authentication router.

Endpoints:
    POST /auth/register       - Register account (status INACTIVE, passcode sent)
    POST /auth/verify         - Activate account with the email passcode
    POST /auth/resend-otp     - Send a fresh verification passcode
    POST /auth/login          - Exchange email and password for tokens
    POST /auth/refresh-token  - Exchange refresh token for access token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    LoginAccount,
    RefreshAccessToken,
    RegisterAccount,
    ResendOtp,
    VerifyEmail,
)
from src.application.commands.handlers import (
    LoginAccountHandler,
    RefreshAccessTokenHandler,
    RegisterAccountHandler,
    ResendOtpHandler,
    VerifyEmailHandler,
)
from src.core.container import (
    get_login_account_handler,
    get_refresh_access_token_handler,
    get_register_account_handler,
    get_resend_otp_handler,
    get_verify_email_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.core.trace_context import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.account_schemas import AccountResponse
from src.schemas.auth_schemas import (
    AccessTokenResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RefreshTokenRequest,
    RegisterRequest,
    RegisterResponse,
    ResendOtpRequest,
    VerifyEmailRequest,
)

router = APIRouter(prefix="/auth", tags=["Auth"])

EMAIL_VERIFIED_MESSAGE = "Email successfully verified! You can now log in."


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={
        400: {"description": "Validation error or email exists", "model": ProblemDetails},
        404: {"description": "Region not found", "model": ProblemDetails},
    },
    summary="Register account",
)
async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterAccountHandler = Depends(get_register_account_handler),
) -> RegisterResponse | JSONResponse:
    """Register an account.

    POST /auth/register → 201 Created

    The account starts INACTIVE; a verification passcode is sent to the
    email address and phone in the background.
    """
    command = RegisterAccount(
        name=data.name,
        email=data.email,
        password=data.password,
        phone=data.phone,
        role=data.role,
        image=data.image,
        birth_year=data.year,
        region_id=data.region_id,
    )

    match await handler.handle(command):
        case Success(value=account):
            return RegisterResponse(user_data=AccountResponse.from_entity(account))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "/verify",
    response_model=MessageResponse,
    responses={
        400: {"description": "Email already verified", "model": ProblemDetails},
        404: {"description": "User not found or passcode invalid", "model": ProblemDetails},
    },
    summary="Verify email",
)
async def verify(
    request: Request,
    data: VerifyEmailRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> MessageResponse | JSONResponse:
    """Activate an account with its email verification passcode.

    POST /auth/verify → 200 OK
    """
    match await handler.handle(VerifyEmail(email=data.email, otp=data.otp)):
        case Success(value=_):
            return MessageResponse(message=EMAIL_VERIFIED_MESSAGE)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
                status_overrides={ErrorCode.INVALID_OTP: status.HTTP_404_NOT_FOUND},
            )


@router.post(
    "/resend-otp",
    response_model=MessageResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Resend verification passcode",
)
async def resend_otp(
    request: Request,
    data: ResendOtpRequest,
    handler: ResendOtpHandler = Depends(get_resend_otp_handler),
) -> MessageResponse | JSONResponse:
    """Send a fresh verification passcode.

    POST /auth/resend-otp → 200 OK

    Answers the same way for already verified accounts (nothing is sent).
    """
    match await handler.handle(ResendOtp(email=data.email)):
        case Success(value=account):
            return MessageResponse(message=f"Otp sent to {account.email}")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Wrong password", "model": ProblemDetails},
        401: {"description": "Email not verified", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Login",
)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginAccountHandler = Depends(get_login_account_handler),
) -> LoginResponse | JSONResponse:
    """Exchange email and password for an access and refresh token pair.

    POST /auth/login → 200 OK
    """
    match await handler.handle(LoginAccount(email=data.email, password=data.password)):
        case Success(value=tokens):
            return LoginResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                token_type=tokens.token_type,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "/refresh-token",
    response_model=AccessTokenResponse,
    responses={
        400: {"description": "Invalid or expired refresh token", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Refresh access token",
)
async def refresh_token(
    request: Request,
    data: RefreshTokenRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_access_token_handler),
) -> AccessTokenResponse | JSONResponse:
    """Exchange a refresh token for a new access token.

    POST /auth/refresh-token → 200 OK
    """
    match await handler.handle(RefreshAccessToken(refresh_token=data.refresh_token)):
        case Success(value=token):
            return AccessTokenResponse(
                access_token=token.access_token, token_type=token.token_type
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
                status_overrides={
                    ErrorCode.TOKEN_INVALID: status.HTTP_400_BAD_REQUEST,
                    ErrorCode.TOKEN_EXPIRED: status.HTTP_400_BAD_REQUEST,
                },
            )
