"""Issue a fresh access token to an already authenticated caller."""

from src.application.commands.account_commands import ReissueAccessToken
from src.application.dtos import AccessToken
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import AccountRepository, TokenIssuerProtocol


class ReissueAccessTokenHandler:
    """Handler for ReissueAccessToken command."""

    def __init__(
        self, account_repo: AccountRepository, token_service: TokenIssuerProtocol
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service

    async def handle(self, cmd: ReissueAccessToken) -> Result[AccessToken, DomainError]:
        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.NOT_FOUND,
                    resource_type="Account",
                    resource_id=str(cmd.account_id),
                )
            )
        return Success(
            value=AccessToken(access_token=self._token_service.issue_access(account))
        )
