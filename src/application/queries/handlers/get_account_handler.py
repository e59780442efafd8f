"""GetAccount query handler."""

from src.application.queries.account_queries import GetAccount
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.errors import AccountError
from src.domain.protocols import AccountRepository


class GetAccountHandler:
    """Handler for GetAccount query."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(self, query: GetAccount) -> Result[Account, DomainError]:
        account = await self._account_repo.find_by_id(query.account_id)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=AccountError.NOT_FOUND,
                    resource_type="Account",
                    resource_id=str(query.account_id),
                )
            )
        return Success(value=account)
