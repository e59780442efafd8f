"""SMTP email service.

smtplib is blocking, so every send runs in a worker thread to keep the
event loop free. Delivery problems come back as ``Failure(error=str)``.
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage

from src.core.result import Failure, Result, Success
from src.domain.enums import OtpPurpose
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import otp_email_body, otp_subject, redact_email


class SmtpEmailService:
    """EmailProtocol implementation over SMTP (STARTTLS or implicit TLS).

    Args:
        host: SMTP server host.
        port: SMTP server port.
        username: Login user (optional).
        password: Login password (optional).
        use_tls: STARTTLS on a plain connection when True, SMTP over SSL
            when False.
        from_email: Sender address.
        timeout: Socket timeout in seconds.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        use_tls: bool,
        from_email: str,
        timeout: float,
        logger: LoggerProtocol,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._from_email = from_email
        self._timeout = timeout
        self._logger = logger

    async def send_otp_email(
        self, to_email: str, code: str, purpose: OtpPurpose
    ) -> Result[None, str]:
        message = EmailMessage()
        message["Subject"] = otp_subject(purpose)
        message["From"] = self._from_email
        message["To"] = to_email
        message.set_content(otp_email_body(code, purpose))

        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as e:
            self._logger.error(
                "email_send_failed",
                error=e,
                to=redact_email(to_email),
                host=self._host,
            )
            return Failure(error=f"SMTP delivery failed: {type(e).__name__}")

        self._logger.info(
            "email_sent", to=redact_email(to_email), purpose=purpose.value
        )
        return Success(value=None)

    def _send(self, message: EmailMessage) -> None:
        context = ssl.create_default_context()
        if self._use_tls:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                server.starttls(context=context)
                self._login(server)
                server.send_message(message)
        else:
            with smtplib.SMTP_SSL(
                self._host, self._port, context=context, timeout=self._timeout
            ) as server:
                self._login(server)
                server.send_message(message)

    def _login(self, server: smtplib.SMTP) -> None:
        if self._username and self._password:
            server.login(self._username, self._password)
