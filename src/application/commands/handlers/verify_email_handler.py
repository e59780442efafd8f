"""Email verification handler.

Flow:
1. Find account by email
2. Verify the passcode for purpose "email"
3. Refuse accounts that are already ACTIVE (nothing happens twice)
4. Activate and persist
"""

from src.application.commands.auth_commands import VerifyEmail
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ConflictError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import OtpPurpose
from src.domain.errors import AccountError
from src.domain.protocols import AccountRepository, LoggerProtocol, OtpProtocol


class VerifyEmailHandler:
    """Handler for VerifyEmail command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        otp_service: OtpProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._otp_service = otp_service
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[Account, DomainError]:
        """Handle email verification.

        Returns:
            Success(Account) with the account now ACTIVE.
            Failure(NotFoundError) if no account has this email.
            Failure(AuthenticationError) with INVALID_OTP for a wrong or
                expired passcode.
            Failure(ConflictError) with ACCOUNT_ALREADY_VERIFIED when the
                account was activated before.
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
            account.email, OtpPurpose.EMAIL_VERIFICATION, cmd.otp
        ):
            self._logger.info("email_verification_failed", account_id=str(account.id))
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_OTP,
                    message=AccountError.VERIFICATION_OTP_INVALID,
                )
            )

        if not account.activate():
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ACCOUNT_ALREADY_VERIFIED,
                    message=AccountError.ALREADY_VERIFIED,
                    resource_type="Account",
                    conflicting_field="status",
                )
            )

        match await self._account_repo.update(account):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=updated):
                self._logger.info("account_verified", account_id=str(updated.id))
                return Success(value=updated)
