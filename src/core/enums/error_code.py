"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming and surfaced to
clients in the ``code`` of problem detail bodies.

Categories:
- Validation errors (INVALID_*, VALIDATION_*, MISSING_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, INVALID_OTP, TOKEN_*)
- Authorization errors (PERMISSION_*, SELF_PROMOTION_DENIED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    INVALID_ROLE = "invalid_role"
    MISSING_FIELD = "missing_field"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"
    REGION_NOT_FOUND = "region_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    REGION_ALREADY_EXISTS = "region_already_exists"
    ACCOUNT_ALREADY_VERIFIED = "account_already_verified"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    INVALID_OTP = "invalid_otp"
    TOKEN_MISSING = "token_missing"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    SELF_PROMOTION_DENIED = "self_promotion_denied"

    # Unexpected failures
    INTERNAL_ERROR = "internal_error"
