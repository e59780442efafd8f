"""Shared fixtures for API tests.

The TestClient is used without its context manager, so the lifespan (schema
creation) never runs; every handler a test reaches is overridden.
"""

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_token_service
from src.domain.enums import AccountRole
from src.main import app
from tests.conftest import create_account


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def override():
    """Register a stub for a handler factory: ``override(get_x_handler, stub)``."""

    def _override(factory, stub):
        app.dependency_overrides[factory] = lambda: stub
        return stub

    return _override


@pytest.fixture
def bearer():
    """Authorization headers for a fresh account with ``role``.

    Returns the headers and the account so tests can refer to its id.
    """

    def _bearer(role: AccountRole = AccountRole.USER, **account_fields):
        account = create_account(role=role, **account_fields)
        token = get_token_service().issue_access(account)
        return {"Authorization": f"Bearer {token}"}, account

    return _bearer
