"""ListAccounts query handler."""

from src.application.dtos import AccountPage
from src.application.queries.account_queries import ListAccounts
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import AccountRepository


class ListAccountsHandler:
    """Handler for ListAccounts query.

    Returns a page of accounts with the total matching count; an offset past
    the end yields an empty page, not an error.
    """

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def handle(self, query: ListAccounts) -> Result[AccountPage, DomainError]:
        items, total = await self._account_repo.list_accounts(
            limit=query.limit,
            offset=query.offset,
            role=query.role,
            status=query.status,
        )
        return Success(
            value=AccountPage(
                items=items, total=total, limit=query.limit, offset=query.offset
            )
        )
