"""Account DTOs."""

from dataclasses import dataclass

from src.domain.entities.account import Account


@dataclass(frozen=True, kw_only=True)
class AccountPage:
    """One page of an account listing.

    Attributes:
        items: Accounts on this page.
        total: Number of accounts matching the filters.
        limit: Requested page size.
        offset: Requested offset.
    """

    items: list[Account]
    total: int
    limit: int
    offset: int


@dataclass(frozen=True, kw_only=True)
class RoleChange:
    """Outcome of a promotion.

    Attributes:
        account: Target account after the operation.
        changed: False when the account already had the requested role.
    """

    account: Account
    changed: bool
