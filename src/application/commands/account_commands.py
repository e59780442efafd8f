"""Account administration commands (write operations).

Commands carry the acting account (id and role from verified token claims)
where the outcome depends on who is asking.
"""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from src.domain.enums import AccountRole


@dataclass(frozen=True, kw_only=True)
class PromoteRole:
    """Change another account's role (administrators only).

    Attributes:
        acting_account_id: Administrator performing the change.
        target_account_id: Account whose role changes.
        role: New role.
    """

    acting_account_id: UUID
    target_account_id: UUID
    role: AccountRole


@dataclass(frozen=True, kw_only=True)
class UpdateAccountProfile:
    """Edit profile fields of an account (self or ADMIN).

    Attributes:
        acting_account_id: Caller.
        acting_role: Caller's role.
        target_account_id: Account to edit.
        changes: Profile field name to new value; only fields present in the
            request are included.
    """

    acting_account_id: UUID
    acting_role: AccountRole
    target_account_id: UUID
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DeleteAccount:
    """Delete an account (self or ADMIN)."""

    acting_account_id: UUID
    acting_role: AccountRole
    target_account_id: UUID


@dataclass(frozen=True, kw_only=True)
class ReissueAccessToken:
    """Issue a fresh access token to an authenticated caller."""

    account_id: UUID
