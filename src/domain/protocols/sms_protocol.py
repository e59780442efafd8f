"""SMS delivery protocol."""

from typing import Protocol

from src.core.result import Result


class SMSProtocol(Protocol):
    """Send text messages.

    Implementations:
        - EskizSmsService: Eskiz HTTP API
        - StubSmsService: logs the message (development, tests)
    """

    async def send_otp_sms(self, phone_number: str, code: str) -> Result[None, str]:
        """Deliver a one-time passcode by SMS."""
        ...
