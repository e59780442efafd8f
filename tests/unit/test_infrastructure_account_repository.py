"""Unit tests for the SQLAlchemy repositories with a mocked AsyncSession.

Query construction is SQLAlchemy's job; these tests pin down the mapping
between rows and entities and how store errors become Results.
"""

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Success
from src.domain.enums import AccountRole, AccountStatus
from src.infrastructure.persistence.repositories import (
    AccountRepository,
    RegionRepository,
)
from tests.conftest import create_account, create_region


def _session(*results):
    session = AsyncMock()
    session.add = Mock()
    session.execute.side_effect = list(results)
    return session


def _row_result(model):
    result = MagicMock()
    result.scalar_one_or_none.return_value = model
    return result


def _integrity_error():
    return IntegrityError("INSERT INTO users", {}, Exception("duplicate key"))


@pytest.mark.unit
class TestAccountRepositoryMapping:
    @pytest.mark.asyncio
    async def test_find_by_email_maps_row_to_entity(self):
        account = create_account(role=AccountRole.CEO, status=AccountStatus.INACTIVE)
        account.birth_year = 1990
        model = AccountRepository(AsyncMock())._to_model(account)
        repo = AccountRepository(_session(_row_result(model)))

        found = await repo.find_by_email("AZIZA@example.com")

        assert found == account

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self):
        repo = AccountRepository(_session(_row_result(None)))

        assert await repo.find_by_id(uuid7()) is None

    @pytest.mark.asyncio
    async def test_list_accounts_returns_page_and_total(self):
        account = create_account()
        model = AccountRepository(AsyncMock())._to_model(account)
        count_result = MagicMock()
        count_result.scalar_one.return_value = 7
        page_result = MagicMock()
        page_result.scalars.return_value.all.return_value = [model]
        repo = AccountRepository(_session(count_result, page_result))

        items, total = await repo.list_accounts(limit=1, offset=3, role=AccountRole.USER)

        assert total == 7
        assert items == [account]


@pytest.mark.unit
class TestAccountRepositoryWrites:
    @pytest.mark.asyncio
    async def test_create_commits(self):
        account = create_account()
        session = _session()
        repo = AccountRepository(session)

        result = await repo.create(account)

        assert isinstance(result, Success)
        session.add.assert_called_once()
        session.commit.assert_awaited_once()
        assert result.value.email == account.email

    @pytest.mark.asyncio
    async def test_create_duplicate_email_becomes_conflict(self):
        """Two registrations racing for one email: the store decides."""
        account = create_account()
        winner = AccountRepository(AsyncMock())._to_model(create_account())
        session = _session(_row_result(winner))
        session.commit.side_effect = _integrity_error()
        repo = AccountRepository(session)

        result = await repo.create(account)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_other_integrity_error_propagates(self):
        session = _session(_row_result(None))
        session.commit.side_effect = _integrity_error()
        repo = AccountRepository(session)

        with pytest.raises(IntegrityError):
            await repo.create(create_account())

    @pytest.mark.asyncio
    async def test_update_copies_mutable_fields(self):
        account = create_account()
        model = AccountRepository(AsyncMock())._to_model(account)
        session = _session(_row_result(model))
        repo = AccountRepository(session)
        account.change_role(AccountRole.ADMIN)
        account.activate()
        account.change_password_hash("new_hash")

        result = await repo.update(account)

        assert isinstance(result, Success)
        assert model.role == "ADMIN"
        assert model.password_hash == "new_hash"
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_account(self):
        repo = AccountRepository(_session(_row_result(None)))

        result = await repo.update(create_account())

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    async def test_delete_returns_deleted_entity(self):
        account = create_account()
        model = AccountRepository(AsyncMock())._to_model(account)
        session = _session(_row_result(model))
        repo = AccountRepository(session)

        result = await repo.delete(account.id)

        assert result == Success(value=account)
        session.delete.assert_awaited_once_with(model)


@pytest.mark.unit
class TestRegionRepository:
    @pytest.mark.asyncio
    async def test_duplicate_name_conflict(self):
        session = _session()
        session.commit.side_effect = _integrity_error()
        repo = RegionRepository(session)

        result = await repo.create(create_region("Tashkent"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REGION_ALREADY_EXISTS
        session.rollback.assert_awaited_once()
