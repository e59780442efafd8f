"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture. The infrastructure layer
implements it; handlers depend only on this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.account import Account
from src.domain.enums import AccountRole, AccountStatus


class AccountRepository(Protocol):
    """Account repository protocol (port).

    The store performs no hashing: ``password_hash`` must already be hashed
    when an account reaches ``create`` or ``update``.

    Methods:
        find_by_id: Retrieve account by ID
        find_by_email: Retrieve account by email (case-insensitive)
        list_accounts: Paginated listing with optional filters
        create: Persist a new account
        update: Persist changes to an existing account
        delete: Remove an account
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address (case-insensitive).

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def list_accounts(
        self,
        *,
        limit: int,
        offset: int,
        role: AccountRole | None = None,
        status: AccountStatus | None = None,
    ) -> tuple[list[Account], int]:
        """List accounts ordered by creation time.

        Returns:
            Tuple of (page of accounts, total matching count).
        """
        ...

    async def create(self, account: Account) -> Result[Account, DomainError]:
        """Persist a new account.

        Returns:
            Success(Account) with the stored account.
            Failure(ConflictError) if the email is already taken, including
            when a concurrent registration wins the race for it.
        """
        ...

    async def update(self, account: Account) -> Result[Account, DomainError]:
        """Persist changes to an existing account.

        Returns:
            Success(Account) with the stored account.
            Failure(NotFoundError) if the account no longer exists.
        """
        ...

    async def delete(self, account_id: UUID) -> Result[Account, DomainError]:
        """Delete an account.

        Returns:
            Success(Account) with the deleted account.
            Failure(NotFoundError) if absent.
        """
        ...
