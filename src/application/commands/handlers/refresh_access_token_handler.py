"""Refresh handler: trade a refresh token for a new access token.

The new access token carries the account's current role, read from the
store, not the role frozen into the refresh token. The refresh token is not
rotated; it stays valid until it expires.
"""

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos import AccessToken
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import AccountRepository, LoggerProtocol, TokenIssuerProtocol


class RefreshAccessTokenHandler:
    """Handler for RefreshAccessToken command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_service: TokenIssuerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: RefreshAccessToken) -> Result[AccessToken, DomainError]:
        """Handle access token refresh.

        Returns:
            Success(AccessToken).
            Failure(AuthenticationError) with TOKEN_EXPIRED or TOKEN_INVALID.
            Failure(NotFoundError) if the account no longer exists.
        """
        match self._token_service.verify_refresh(cmd.refresh_token):
            case Failure(error=error):
                self._logger.info("token_refresh_failed", reason=error.code.value)
                message = (
                    AccountError.REFRESH_TOKEN_EXPIRED
                    if error.code == ErrorCode.TOKEN_EXPIRED
                    else AccountError.REFRESH_TOKEN_INVALID
                )
                return Failure(error=AuthenticationError(code=error.code, message=message))
            case Success(value=claims):
                pass

        account = await self._account_repo.find_by_id(claims.account_id)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.NOT_FOUND,
                    resource_type="Account",
                    resource_id=str(claims.account_id),
                )
            )

        self._logger.info("access_token_refreshed", account_id=str(account.id))
        return Success(
            value=AccessToken(access_token=self._token_service.issue_access(account))
        )
