"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /auth/register           - Register account
    POST /auth/verify             - Verify email with passcode
    POST /auth/resend-otp         - Resend verification passcode
    POST /auth/login              - Exchange credentials for tokens
    POST /auth/refresh-token      - Exchange refresh token for access token
    POST /password/request-reset  - Send password reset passcode
    POST /password/reset-password - Set new password with passcode
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.enums import AccountRole
from src.domain.types import BirthYear, Email, OtpCode, Password, PersonName, PhoneNumber
from src.schemas.account_schemas import AccountResponse


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for account registration.

    POST /auth/register
    Returns: 201 Created

    CEO accounts must also provide image, year and region_id.
    """

    name: PersonName
    email: Email
    password: Password
    phone: PhoneNumber
    role: AccountRole = Field(
        default=AccountRole.USER,
        description="USER or CEO",
    )
    image: str | None = Field(None, max_length=512, description="Profile image reference")
    year: BirthYear | None = None
    region_id: UUID | None = Field(None, description="Region the account belongs to")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Aziza Karimova",
                "email": "a@x.com",
                "password": "hello",
                "phone": "+998901234567",
                "role": "USER",
            }
        }
    )


class RegisterResponse(BaseModel):
    """Response schema for registration (201 Created)."""

    user_data: AccountResponse
    message: str = Field(
        default="User created successfully, otp is sent to email and phone",
    )


# =============================================================================
# Email verification
# =============================================================================


class VerifyEmailRequest(BaseModel):
    """Request schema for email verification.

    POST /auth/verify
    """

    email: Email
    otp: OtpCode


class ResendOtpRequest(BaseModel):
    """Request schema for resending the verification passcode.

    POST /auth/resend-otp
    """

    email: Email


# =============================================================================
# Login and refresh
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /auth/login
    """

    email: Email
    password: str = Field(..., min_length=1, max_length=72)


class LoginResponse(BaseModel):
    """Response schema for login (200 OK)."""

    access_token: str = Field(..., description="Short-lived access token")
    refresh_token: str = Field(..., description="Refresh token (1 day)")
    token_type: str = Field(default="bearer")


class RefreshTokenRequest(BaseModel):
    """Request schema for refreshing the access token.

    POST /auth/refresh-token
    """

    refresh_token: str = Field(..., min_length=1)


class AccessTokenResponse(BaseModel):
    """Response schema carrying a new access token."""

    access_token: str
    token_type: str = Field(default="bearer")


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetRequest(BaseModel):
    """Request schema for a password reset passcode.

    POST /password/request-reset
    """

    email: Email


class ResetPasswordRequest(BaseModel):
    """Request schema for setting a new password.

    POST /password/reset-password

    Accepts ``newPassword`` as well as ``new_password``.
    """

    email: Email
    new_password: Password = Field(..., alias="newPassword")
    otp: OtpCode

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
