"""Email delivery protocol.

Adapters report delivery problems as ``Failure(error=str)`` and never raise,
so a provider outage can not turn into a failed request.
"""

from typing import Protocol

from src.core.result import Result
from src.domain.enums import OtpPurpose


class EmailProtocol(Protocol):
    """Send transactional email.

    Implementations:
        - SmtpEmailService: SMTP transport
        - StubEmailService: logs the message (development, tests)
    """

    async def send_otp_email(
        self, to_email: str, code: str, purpose: OtpPurpose
    ) -> Result[None, str]:
        """Deliver a one-time passcode by email."""
        ...
