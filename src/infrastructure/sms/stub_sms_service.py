"""Stub SMS service for development and tests."""

from src.core.result import Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubSmsService:
    """SMSProtocol implementation that only logs (including the code)."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send_otp_sms(self, phone_number: str, code: str) -> Result[None, str]:
        self._logger.info("sms_stub_delivery", to=phone_number, code=code)
        return Success(value=None)
