"""Eskiz SMS service (adapter).

Sends text messages through the Eskiz HTTP API:

    POST {base_url}message/sms/send
    Authorization: Bearer <token>
    form: mobile_phone, message, from

Eskiz expects the number without the leading ``+``.
"""

import httpx

from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import otp_sms_text


class EskizSmsService:
    """SMSProtocol implementation backed by Eskiz.

    Args:
        base_url: API base URL, ending in a slash.
        token: Bearer token.
        sender: Sender id shown to the recipient.
        timeout: Request timeout in seconds.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        sender: str,
        timeout: float,
        logger: LoggerProtocol,
    ) -> None:
        self._send_url = f"{base_url.rstrip('/')}/message/sms/send"
        self._token = token
        self._sender = sender
        self._timeout = timeout
        self._logger = logger

    async def send_otp_sms(self, phone_number: str, code: str) -> Result[None, str]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._send_url,
                    headers={"Authorization": f"Bearer {self._token}"},
                    data={
                        "mobile_phone": phone_number.lstrip("+"),
                        "message": otp_sms_text(code),
                        "from": self._sender,
                    },
                )
        except httpx.TimeoutException as e:
            self._logger.warning("sms_send_timeout", error=str(e))
            return Failure(error="SMS provider request timed out")
        except httpx.RequestError as e:
            self._logger.warning("sms_send_connection_error", error=str(e))
            return Failure(error=f"Failed to connect to SMS provider: {type(e).__name__}")

        if response.is_error:
            self._logger.warning(
                "sms_send_rejected",
                status_code=response.status_code,
                body=response.text[:200],
            )
            return Failure(error=f"SMS provider returned {response.status_code}")

        self._logger.info("sms_sent", phone_suffix=phone_number[-4:])
        return Success(value=None)
