"""Validators package exports."""

from src.domain.validators.functions import (
    validate_email,
    validate_otp_code,
    validate_password_bytes,
    validate_phone_number,
)

__all__ = [
    "validate_email",
    "validate_otp_code",
    "validate_password_bytes",
    "validate_phone_number",
]
