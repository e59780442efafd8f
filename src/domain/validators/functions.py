"""Centralized validation functions.

Validators are pure functions that raise ValueError on failure. They are
attached to the Annotated types in ``src.domain.types`` so every schema that
accepts an email, phone number or passcode validates it the same way.
"""

import re

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_PHONE_PATTERN = re.compile(r"^\+\d{12}$")
_OTP_PATTERN = re.compile(r"^\d+$")

# bcrypt reads at most this many bytes of the password
BCRYPT_MAX_PASSWORD_BYTES = 72


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase, surrounding whitespace removed).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
    """
    candidate = v.strip()
    if not _EMAIL_PATTERN.match(candidate):
        raise ValueError(f"Invalid email format: {v}")
    return candidate.lower()


def validate_phone_number(v: str) -> str:
    """Validate international phone number.

    Phone numbers are stored in full international form: a leading ``+``
    followed by 12 digits (13 characters, e.g. ``+998901234567``).

    Raises:
        ValueError: If the number does not match the expected form.
    """
    candidate = v.strip()
    if not _PHONE_PATTERN.match(candidate):
        raise ValueError("Phone number must be '+' followed by 12 digits")
    return candidate


def validate_otp_code(v: str) -> str:
    """Validate that a passcode consists of digits only."""
    candidate = v.strip()
    if not _OTP_PATTERN.match(candidate):
        raise ValueError("OTP must contain digits only")
    return candidate


def validate_password_bytes(v: str) -> str:
    """Reject passwords longer than bcrypt accepts.

    The limit is in UTF-8 bytes, so 40 accented letters (80 bytes) are
    already too long even though they are only 40 characters.

    Raises:
        ValueError: If the encoded password exceeds 72 bytes.
    """
    if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes "
            "(non-ASCII characters count as several)"
        )
    return v
