"""Authentication commands (write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Field formats (email, phone, passcode) are validated by the
request schemas before a command is built.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AccountRole


@dataclass(frozen=True, kw_only=True)
class RegisterAccount:
    """Register a new account.

    The account starts INACTIVE; an email verification passcode is sent to
    the email address and, when given, to the phone.

    Attributes:
        name: Display name.
        email: Normalized email address.
        password: Plaintext password (hashed by the handler).
        phone: International phone number.
        role: Requested role (USER or CEO).
        image: Profile image reference (required for CEO).
        birth_year: Birth year (required for CEO).
        region_id: Region reference (required for CEO).

    Example:
        >>> command = RegisterAccount(
        ...     name="Aziza",
        ...     email="a@x.com",
        ...     password="hello",
        ...     phone="+998901234567",
        ...     role=AccountRole.USER,
        ... )
        >>> result = await handler.handle(command)
    """

    name: str
    email: str
    password: str
    phone: str | None
    role: AccountRole = AccountRole.USER
    image: str | None = None
    birth_year: int | None = None
    region_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Confirm the email verification passcode and activate the account."""

    email: str
    otp: str


@dataclass(frozen=True, kw_only=True)
class ResendOtp:
    """Send a fresh email verification passcode."""

    email: str


@dataclass(frozen=True, kw_only=True)
class LoginAccount:
    """Exchange email and password for an access and refresh token pair."""

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new access token.

    The refresh token itself is not rotated.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Send a password reset passcode to the account's email."""

    email: str


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Set a new password after confirming the password reset passcode.

    Attributes:
        email: Account email.
        new_password: Plaintext password (hashed by the handler).
        otp: Password reset passcode.
    """

    email: str
    new_password: str
    otp: str
