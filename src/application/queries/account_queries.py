"""Account queries (read operations).

Queries are immutable dataclasses with question-like names. They never
change state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AccountRole, AccountStatus


@dataclass(frozen=True, kw_only=True)
class GetAccount:
    """Get a single account by ID."""

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAccounts:
    """List accounts page by page.

    Attributes:
        limit: Page size.
        offset: Number of accounts to skip.
        role: Only accounts with this role.
        status: Only accounts with this status.
    """

    limit: int = 20
    offset: int = 0
    role: AccountRole | None = None
    status: AccountStatus | None = None
