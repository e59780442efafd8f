"""Notification dispatcher protocol.

Dispatch is fire-and-forget: the caller never waits for delivery and never
sees delivery failures.
"""

from typing import Protocol

from src.domain.enums import OtpPurpose


class NotificationDispatcherProtocol(Protocol):
    """Schedule passcode delivery over every available channel."""

    def dispatch_otp(
        self,
        *,
        email: str,
        phone: str | None,
        code: str,
        purpose: OtpPurpose,
    ) -> None:
        """Schedule delivery by email and, when ``phone`` is set, by SMS."""
        ...
