"""Login handler.

Flow:
1. Find account by email (NotFound)
2. Verify password (InvalidCredentials)
3. Require ACTIVE status (Unverified)
4. Issue access and refresh tokens

The password is checked before the status so that an unverified account
only learns it is unverified once the right password is given.
"""

import asyncio

from src.application.commands.auth_commands import LoginAccount
from src.application.dtos import AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenIssuerProtocol,
)


class LoginAccountHandler:
    """Handler for LoginAccount command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenIssuerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginAccount) -> Result[AuthTokens, DomainError]:
        """Handle login.

        Returns:
            Success(AuthTokens) with access and refresh tokens.
            Failure(NotFoundError) if no account has this email.
            Failure(AuthenticationError) with INVALID_CREDENTIALS for a wrong
                password, or EMAIL_NOT_VERIFIED for an INACTIVE account.
        """
        account = await self._account_repo.find_by_email(cmd.email)
        if account is None:
            self._logger.info("login_failed", reason="account_not_found")
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.NOT_FOUND,
                    resource_type="Account",
                    resource_id=cmd.email,
                )
            )

        password_ok = await asyncio.to_thread(
            self._password_service.verify_password, cmd.password, account.password_hash
        )
        if not password_ok:
            self._logger.info(
                "login_failed", reason="wrong_password", account_id=str(account.id)
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=AccountError.WRONG_PASSWORD,
                )
            )

        if not account.can_login():
            self._logger.info(
                "login_failed", reason="not_verified", account_id=str(account.id)
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.EMAIL_NOT_VERIFIED,
                    message=AccountError.NOT_VERIFIED,
                )
            )

        tokens = AuthTokens(
            access_token=self._token_service.issue_access(account),
            refresh_token=self._token_service.issue_refresh(account),
        )
        self._logger.info("login_succeeded", account_id=str(account.id))
        return Success(value=tokens)
