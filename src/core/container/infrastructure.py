"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Password hashing (bcrypt)
- Session tokens (JWT)
- One-time passcodes (TOTP)
- Email (SMTP/stub)
- SMS (Eskiz/stub)
- Notification dispatch (background tasks)
- Logging (console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        EmailProtocol,
        LoggerProtocol,
        OtpProtocol,
        PasswordHashingProtocol,
        SMSProtocol,
        TokenIssuerProtocol,
    )
    from src.infrastructure.notifications import BackgroundNotificationDispatcher


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenIssuerProtocol":
    """Get JWT token service singleton (app-scoped).

    Access and refresh tokens are signed with separate secrets.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        access_secret=settings.access_token_secret,
        refresh_secret=settings.refresh_token_secret,
        access_expire_minutes=settings.access_token_expire_minutes,
        refresh_expire_days=settings.refresh_token_expire_days,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_otp_service() -> "OtpProtocol":
    """Get one-time passcode service singleton (app-scoped)."""
    from src.domain.enums import OtpPurpose
    from src.infrastructure.security import TotpService

    return TotpService(
        settings.otp_secret,
        digits=settings.otp_digits,
        step_seconds={
            OtpPurpose.EMAIL_VERIFICATION: settings.otp_verification_step_seconds,
            OtpPurpose.PASSWORD_RESET: settings.otp_password_reset_step_seconds,
        },
        valid_window=settings.otp_valid_window,
    )


# ============================================================================
# Notification Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Returns SmtpEmailService when SMTP_HOST is configured, otherwise
    StubEmailService (logs the message instead of sending it). Settings
    refuse to load in production without SMTP_HOST, so the stub never
    serves production traffic.
    """
    from src.infrastructure.email import SmtpEmailService, StubEmailService

    logger = get_logger()
    if settings.smtp_host:
        return SmtpEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            from_email=settings.email_from,
            timeout=settings.notification_timeout_seconds,
            logger=logger,
        )
    return StubEmailService(logger=logger)


@lru_cache()
def get_sms_service() -> "SMSProtocol":
    """Get SMS service singleton (app-scoped).

    Returns EskizSmsService when ESKIZ_TOKEN is configured, otherwise
    StubSmsService (development, testing and ci only; see Settings).
    """
    from src.infrastructure.sms import EskizSmsService, StubSmsService

    logger = get_logger()
    if settings.eskiz_token:
        return EskizSmsService(
            base_url=settings.eskiz_base_url,
            token=settings.eskiz_token,
            sender=settings.sms_sender,
            timeout=settings.notification_timeout_seconds,
            logger=logger,
        )
    return StubSmsService(logger=logger)


@lru_cache()
def get_notification_dispatcher() -> "BackgroundNotificationDispatcher":
    """Get notification dispatcher singleton (app-scoped).

    Holds in-flight delivery tasks; drained on application shutdown.
    """
    from src.infrastructure.notifications import BackgroundNotificationDispatcher

    return BackgroundNotificationDispatcher(
        email_service=get_email_service(),
        sms_service=get_sms_service(),
        logger=get_logger(),
        timeout_seconds=settings.notification_timeout_seconds,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Usage:
        # Presentation Layer (FastAPI endpoint)
        from fastapi import Depends
        from sqlalchemy.ext.asyncio import AsyncSession

        @router.get("/user")
        async def list_users(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
