"""Stub email service for development and tests.

Logs the message instead of sending it. With no SMTP server configured this
is the delivery channel, so the passcode is part of the log line.
"""

from src.core.result import Result, Success
from src.domain.enums import OtpPurpose
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import otp_subject


class StubEmailService:
    """EmailProtocol implementation that only logs."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send_otp_email(
        self, to_email: str, code: str, purpose: OtpPurpose
    ) -> Result[None, str]:
        self._logger.info(
            "email_stub_delivery",
            to=to_email,
            subject=otp_subject(purpose),
            purpose=purpose.value,
            code=code,
        )
        return Success(value=None)
