"""Annotated types with centralized validation.

Define validation once, use everywhere. All custom types use Pydantic's
Annotated with Field constraints and AfterValidator.

Usage:
    from src.domain.types import Email, PhoneNumber

    class RegisterRequest(BaseModel):
        email: Email  # Validation included!
        phone: PhoneNumber
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_otp_code,
    validate_password_bytes,
    validate_phone_number,
)

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, normalized to lowercase."""

Password = Annotated[
    str,
    Field(
        min_length=4,
        max_length=72,
        description="Account password (stored only as a bcrypt hash)",
        examples=["hello-world"],
    ),
    AfterValidator(validate_password_bytes),
]
"""Plaintext password; at most 72 UTF-8 bytes so bcrypt never truncates or refuses it."""

PhoneNumber = Annotated[
    str,
    Field(
        min_length=13,
        max_length=13,
        description="International phone number, '+' followed by 12 digits",
        examples=["+998901234567"],
    ),
    AfterValidator(validate_phone_number),
]

OtpCode = Annotated[
    str,
    Field(
        min_length=4,
        max_length=10,
        description="One-time passcode delivered by email or SMS",
        examples=["04817"],
    ),
    AfterValidator(validate_otp_code),
]

PersonName = Annotated[
    str,
    Field(
        min_length=1,
        max_length=255,
        description="Display name",
        examples=["Aziza Karimova"],
    ),
]

BirthYear = Annotated[
    int,
    Field(
        ge=1900,
        le=2100,
        description="Birth year",
        examples=[1998],
    ),
]
