"""One-time passcode protocol for domain layer.

Passcodes are never stored. They are derived from (identity, purpose,
time window) with a shared secret; verification recomputes and compares.
"""

from typing import Protocol

from src.domain.enums import OtpPurpose


class OtpProtocol(Protocol):
    """Generate and verify purpose-bound one-time passcodes.

    Usage:
        code = otp_service.generate(account.email, OtpPurpose.EMAIL_VERIFICATION)
        otp_service.verify(account.email, OtpPurpose.EMAIL_VERIFICATION, code)  # True
        otp_service.verify(account.email, OtpPurpose.PASSWORD_RESET, code)  # False
    """

    def generate(self, identity: str, purpose: OtpPurpose) -> str:
        """Return the fixed-length decimal code for the current time window.

        Raises:
            ValueError: If identity is empty or purpose is unknown.
        """
        ...

    def verify(self, identity: str, purpose: OtpPurpose, code: str) -> bool:
        """Check a candidate code against the current and adjacent windows.

        Returns:
            False for a wrong, expired or malformed code.

        Raises:
            ValueError: If identity is empty or purpose is unknown.
        """
        ...
