"""Fire-and-forget passcode delivery.

``dispatch_otp`` schedules delivery on the running event loop and returns at
once, so a slow or broken provider never delays the response. Each channel
attempt is bounded by a timeout. Failures, timeouts and unexpected errors
are logged and swallowed here: delivery outcome is not part of any request
result.
"""

import asyncio
from collections.abc import Awaitable

from src.core.result import Failure, Result
from src.domain.enums import OtpPurpose
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.sms_protocol import SMSProtocol


class BackgroundNotificationDispatcher:
    """NotificationDispatcherProtocol implementation on asyncio tasks.

    Args:
        email_service: Email channel.
        sms_service: SMS channel.
        logger: Structured logger.
        timeout_seconds: Upper bound for one channel attempt.

    Usage:
        dispatcher.dispatch_otp(
            email=account.email,
            phone=account.phone,
            code=code,
            purpose=OtpPurpose.EMAIL_VERIFICATION,
        )
        # ... at shutdown
        await dispatcher.drain()
    """

    def __init__(
        self,
        *,
        email_service: EmailProtocol,
        sms_service: SMSProtocol,
        logger: LoggerProtocol,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._email_service = email_service
        self._sms_service = sms_service
        self._logger = logger
        self._timeout = timeout_seconds
        # Strong references; the loop only keeps weak ones
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._tasks)

    def dispatch_otp(
        self,
        *,
        email: str,
        phone: str | None,
        code: str,
        purpose: OtpPurpose,
    ) -> None:
        """Schedule delivery by email and, when ``phone`` is set, by SMS.

        Must be called from within a running event loop.
        """
        self._spawn(
            "email",
            self._email_service.send_otp_email(email, code, purpose),
            purpose,
        )
        if phone:
            self._spawn(
                "sms",
                self._sms_service.send_otp_sms(phone, code),
                purpose,
            )

    async def drain(self, timeout: float | None = None) -> None:
        """Wait for in-flight deliveries (shutdown, tests).

        Deliveries still running after ``timeout`` are cancelled.
        """
        if not self._tasks:
            return
        tasks = list(self._tasks)
        _, still_running = await asyncio.wait(tasks, timeout=timeout)
        for task in still_running:
            task.cancel()
        if still_running:
            self._logger.warning("notification_drain_cancelled", count=len(still_running))
            await asyncio.gather(*still_running, return_exceptions=True)

    def _spawn(
        self,
        channel: str,
        delivery: Awaitable[Result[None, str]],
        purpose: OtpPurpose,
    ) -> None:
        task = asyncio.get_running_loop().create_task(
            self._deliver(channel, delivery, purpose)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _deliver(
        self,
        channel: str,
        delivery: Awaitable[Result[None, str]],
        purpose: OtpPurpose,
    ) -> None:
        try:
            result = await asyncio.wait_for(delivery, timeout=self._timeout)
        except TimeoutError:
            self._logger.warning(
                "notification_timeout",
                channel=channel,
                purpose=purpose.value,
                timeout_seconds=self._timeout,
            )
            return
        except Exception as e:
            # Provider adapters should not raise; a bug there must not surface
            self._logger.error(
                "notification_crashed",
                error=e,
                channel=channel,
                purpose=purpose.value,
            )
            return

        if isinstance(result, Failure):
            self._logger.warning(
                "notification_failed",
                channel=channel,
                purpose=purpose.value,
                reason=result.error,
            )
