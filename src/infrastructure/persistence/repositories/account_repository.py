"""AccountRepository - SQLAlchemy implementation of the AccountRepository protocol.

Adapter for hexagonal architecture. Maps between the domain Account entity
and the ``users`` table model.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import AccountRole, AccountStatus
from src.domain.errors import AccountError
from src.infrastructure.persistence.models.user import User as UserModel


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        stmt = select(UserModel).where(UserModel.id == account_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address.

        Emails are stored lowercase; the lookup lowercases both sides so
        mixed-case input still matches.
        """
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def list_accounts(
        self,
        *,
        limit: int,
        offset: int,
        role: AccountRole | None = None,
        status: AccountStatus | None = None,
    ) -> tuple[list[Account], int]:
        filters = []
        if role is not None:
            filters.append(UserModel.role == role.value)
        if status is not None:
            filters.append(UserModel.status == status.value)

        count_stmt = select(func.count()).select_from(UserModel).where(*filters)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(UserModel)
            .where(*filters)
            .order_by(UserModel.created_at, UserModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        accounts = [self._to_domain(model) for model in result.scalars().all()]

        return accounts, total

    async def create(self, account: Account) -> Result[Account, DomainError]:
        """Insert a new account.

        The unique index on email is the final arbiter when two registrations
        race past the handler's existence check: the loser gets a Conflict.
        """
        user_model = self._to_model(account)
        self.session.add(user_model)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            if await self.find_by_email(account.email) is not None:
                return Failure(error=_email_conflict(account.email))
            raise

        await self.session.refresh(user_model)
        return Success(value=self._to_domain(user_model))

    async def update(self, account: Account) -> Result[Account, DomainError]:
        stmt = select(UserModel).where(UserModel.id == account.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return Failure(error=_account_not_found(account.id))

        user_model.name = account.name
        user_model.phone = account.phone
        user_model.password_hash = account.password_hash
        user_model.role = account.role.value
        user_model.status = account.status.value
        user_model.image = account.image
        user_model.year = account.birth_year
        user_model.region_id = account.region_id
        user_model.updated_at = account.updated_at

        await self.session.commit()
        await self.session.refresh(user_model)

        return Success(value=self._to_domain(user_model))

    async def delete(self, account_id: UUID) -> Result[Account, DomainError]:
        stmt = select(UserModel).where(UserModel.id == account_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return Failure(error=_account_not_found(account_id))

        deleted = self._to_domain(user_model)
        await self.session.delete(user_model)
        await self.session.commit()

        return Success(value=deleted)

    def _to_domain(self, user_model: UserModel) -> Account:
        return Account(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            phone=user_model.phone,
            password_hash=user_model.password_hash,
            role=AccountRole(user_model.role),
            status=AccountStatus(user_model.status),
            image=user_model.image,
            birth_year=user_model.year,
            region_id=user_model.region_id,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, account: Account) -> UserModel:
        return UserModel(
            id=account.id,
            name=account.name,
            email=account.email,
            phone=account.phone,
            password_hash=account.password_hash,
            role=account.role.value,
            status=account.status.value,
            image=account.image,
            year=account.birth_year,
            region_id=account.region_id,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


def _email_conflict(email: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message=AccountError.EMAIL_EXISTS,
        resource_type="Account",
        conflicting_field="email",
        details={"email": email},
    )


def _account_not_found(account_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message=AccountError.NOT_FOUND,
        resource_type="Account",
        resource_id=str(account_id),
    )
