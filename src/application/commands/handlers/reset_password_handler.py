"""Password reset handler.

Flow:
1. Find account by email
2. Verify the passcode for purpose "reset_password"
3. Hash the new password and persist

Issued session tokens are stateless and stay valid until they expire.
"""

import asyncio

from src.application.commands.auth_commands import ResetPassword
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import OtpPurpose
from src.domain.errors import AccountError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    OtpProtocol,
    PasswordHashingProtocol,
)


class ResetPasswordHandler:
    """Handler for ResetPassword command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        otp_service: OtpProtocol,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._otp_service = otp_service
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[Account, DomainError]:
        """Handle password reset.

        Returns:
            Success(Account) with the new password hash stored.
            Failure(NotFoundError) if no account has this email.
            Failure(AuthenticationError) with INVALID_OTP for a wrong or
                expired passcode.
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

        if not self._otp_service.verify(
            account.email, OtpPurpose.PASSWORD_RESET, cmd.otp
        ):
            self._logger.info("password_reset_failed", account_id=str(account.id))
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_OTP,
                    message=AccountError.RESET_OTP_INVALID,
                )
            )

        password_hash = await asyncio.to_thread(
            self._password_service.hash_password, cmd.new_password
        )
        account.change_password_hash(password_hash)

        match await self._account_repo.update(account):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=updated):
                self._logger.info("password_reset_completed", account_id=str(updated.id))
                return Success(value=updated)
