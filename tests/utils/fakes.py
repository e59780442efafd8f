"""In-memory test doubles for repository and dispatcher protocols.

They satisfy the domain protocols structurally, like the SQLAlchemy
repositories, and let flow tests run without a database.
"""

from dataclasses import dataclass, replace
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.entities.region import Region
from src.domain.enums import AccountRole, AccountStatus, OtpPurpose
from src.domain.errors import AccountError, RegionError


class InMemoryAccountRepository:
    """AccountRepository backed by a dict; returns copies like a real store."""

    def __init__(self, accounts: list[Account] | None = None) -> None:
        self._accounts: dict[UUID, Account] = {}
        for account in accounts or []:
            self._accounts[account.id] = replace(account)

    async def find_by_id(self, account_id: UUID) -> Account | None:
        account = self._accounts.get(account_id)
        return replace(account) if account else None

    async def find_by_email(self, email: str) -> Account | None:
        for account in self._accounts.values():
            if account.email.lower() == email.lower():
                return replace(account)
        return None

    async def list_accounts(
        self,
        *,
        limit: int,
        offset: int,
        role: AccountRole | None = None,
        status: AccountStatus | None = None,
    ) -> tuple[list[Account], int]:
        matching = [
            account
            for account in sorted(self._accounts.values(), key=lambda a: a.created_at)
            if (role is None or account.role == role)
            and (status is None or account.status == status)
        ]
        page = [replace(a) for a in matching[offset : offset + limit]]
        return page, len(matching)

    async def create(self, account: Account) -> Result[Account, DomainError]:
        if await self.find_by_email(account.email) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message=AccountError.EMAIL_EXISTS,
                    resource_type="Account",
                    conflicting_field="email",
                )
            )
        self._accounts[account.id] = replace(account)
        return Success(value=replace(account))

    async def update(self, account: Account) -> Result[Account, DomainError]:
        if account.id not in self._accounts:
            return Failure(error=_not_found(account.id))
        self._accounts[account.id] = replace(account)
        return Success(value=replace(account))

    async def delete(self, account_id: UUID) -> Result[Account, DomainError]:
        account = self._accounts.pop(account_id, None)
        if account is None:
            return Failure(error=_not_found(account_id))
        return Success(value=account)

    def add(self, account: Account) -> None:
        """Synchronous seed for test setup."""
        self._accounts[account.id] = replace(account)

    def get(self, account_id: UUID) -> Account | None:
        """Synchronous peek for assertions."""
        return self._accounts.get(account_id)


class InMemoryRegionRepository:
    def __init__(self, regions: list[Region] | None = None) -> None:
        self._regions: dict[UUID, Region] = {r.id: r for r in regions or []}

    async def find_by_id(self, region_id: UUID) -> Region | None:
        return self._regions.get(region_id)

    async def list_all(self) -> list[Region]:
        return sorted(self._regions.values(), key=lambda r: r.name)

    async def create(self, region: Region) -> Result[Region, DomainError]:
        if any(r.name == region.name for r in self._regions.values()):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGION_ALREADY_EXISTS,
                    message=RegionError.ALREADY_EXISTS,
                    resource_type="Region",
                    conflicting_field="name",
                )
            )
        self._regions[region.id] = region
        return Success(value=region)


@dataclass(frozen=True)
class DispatchedOtp:
    email: str
    phone: str | None
    code: str
    purpose: OtpPurpose


class RecordingDispatcher:
    """NotificationDispatcherProtocol that records instead of delivering."""

    def __init__(self) -> None:
        self.sent: list[DispatchedOtp] = []

    def dispatch_otp(
        self,
        *,
        email: str,
        phone: str | None,
        code: str,
        purpose: OtpPurpose,
    ) -> None:
        self.sent.append(
            DispatchedOtp(email=email, phone=phone, code=code, purpose=purpose)
        )

    def last_code(self, email: str, purpose: OtpPurpose) -> str:
        for otp in reversed(self.sent):
            if otp.email == email and otp.purpose == purpose:
                return otp.code
        raise LookupError(f"No {purpose.value} passcode sent to {email}")


def _not_found(account_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message=AccountError.NOT_FOUND,
        resource_type="Account",
        resource_id=str(account_id),
    )
