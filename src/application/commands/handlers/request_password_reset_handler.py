"""Password reset request handler.

Sends a passcode bound to the "reset_password" purpose to the account's
email only. A verification passcode cannot be used to reset a password and
vice versa.
"""

from src.application.commands.auth_commands import RequestPasswordReset
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


class RequestPasswordResetHandler:
    """Handler for RequestPasswordReset command."""

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

    async def handle(self, cmd: RequestPasswordReset) -> Result[Account, DomainError]:
        """Handle password reset request.

        Returns:
            Success(Account) once delivery is scheduled.
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

        code = self._otp_service.generate(account.email, OtpPurpose.PASSWORD_RESET)
        self._notification_dispatcher.dispatch_otp(
            email=account.email,
            phone=None,
            code=code,
            purpose=OtpPurpose.PASSWORD_RESET,
        )
        self._logger.info("password_reset_requested", account_id=str(account.id))
        return Success(value=account)
