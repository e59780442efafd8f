"""Account domain error messages.

Human-readable messages used in the DomainError values that account
handlers return. They are part of the public API: clients show them as-is.

Usage:
    from src.domain.errors import AccountError

    return Failure(error=NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message=AccountError.NOT_FOUND,
        resource_type="Account",
        resource_id=email,
    ))
"""


class AccountError:
    """Account error message constants."""

    # Lookup
    NOT_FOUND = "User not found"
    REGION_NOT_FOUND = "Region not found"

    # Registration
    EMAIL_EXISTS = "User already exists, email exists"
    ROLE_NOT_ALLOWED = "Role must be one of {roles}"
    FIELD_REQUIRED_FOR_ROLE = "{field} is required for {role} accounts"

    # Verification and passcodes
    VERIFICATION_OTP_INVALID = "Otp is not valid"
    RESET_OTP_INVALID = "OTP is not valid"
    ALREADY_VERIFIED = "Email already verified"

    # Login
    WRONG_PASSWORD = "Wrong password"
    NOT_VERIFIED = "Verify your email first!"

    # Refresh
    REFRESH_TOKEN_INVALID = "Invalid refresh token"
    REFRESH_TOKEN_EXPIRED = "Refresh token expired"

    # Administration
    PROMOTION_TARGET_NOT_FOUND = "User with {account_id} id not found"
    SELF_PROMOTION = "You cannot promote yourself!"
    UPDATE_FORBIDDEN = (
        "You are not allowed to update this user. "
        "{role} can update only their own account. "
        "Only ADMIN can update other accounts"
    )
    DELETE_FORBIDDEN = (
        "You are not allowed to delete this user. "
        "{role} can delete only their own account. "
        "Only ADMIN can delete other accounts"
    )


class RegionError:
    """Region error message constants."""

    ALREADY_EXISTS = "Region already exists"
