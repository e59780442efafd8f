"""Domain enums.

Available Enums:
    - AccountRole: roles carried in token claims and checked by the access gate
    - AccountStatus: activation status (INACTIVE, ACTIVE)
    - OtpPurpose: flows a one-time passcode is bound to
    - TokenType: access and refresh token classes
"""

from src.domain.enums.account_role import (
    PROMOTABLE_ROLES,
    SELF_REGISTRATION_ROLES,
    AccountRole,
)
from src.domain.enums.account_status import AccountStatus
from src.domain.enums.otp_purpose import OtpPurpose
from src.domain.enums.token_type import TokenType

__all__ = [
    "AccountRole",
    "AccountStatus",
    "OtpPurpose",
    "PROMOTABLE_ROLES",
    "SELF_REGISTRATION_ROLES",
    "TokenType",
]
