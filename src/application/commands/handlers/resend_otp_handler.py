"""Resend verification passcode handler.

An already ACTIVE account gets the same answer as an INACTIVE one, but no
passcode is sent, so the response does not reveal the activation state.
"""

from src.application.commands.auth_commands import ResendOtp
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import OtpPurpose
from src.domain.errors import AccountError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    NotificationDispatcherProtocol,
    OtpProtocol,
)


class ResendOtpHandler:
    """Handler for ResendOtp command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        otp_service: OtpProtocol,
        notification_dispatcher: NotificationDispatcherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._otp_service = otp_service
        self._notification_dispatcher = notification_dispatcher
        self._logger = logger

    async def handle(self, cmd: ResendOtp) -> Result[Account, DomainError]:
        """Handle passcode resend.

        Returns:
            Success(Account) whether or not a passcode was dispatched.
            Failure(NotFoundError) if no account has this email.
        """
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.NOT_FOUND,
                    resource_type="Account",
                    resource_id=cmd.email,
                )
            )

        if account.is_active():
            self._logger.info("otp_resend_skipped", account_id=str(account.id))
            return Success(value=account)

        code = self._otp_service.generate(account.email, OtpPurpose.EMAIL_VERIFICATION)
        self._notification_dispatcher.dispatch_otp(
            email=account.email,
            phone=account.phone,
            code=code,
            purpose=OtpPurpose.EMAIL_VERIFICATION,
        )
        self._logger.info("otp_resent", account_id=str(account.id))
        return Success(value=account)
