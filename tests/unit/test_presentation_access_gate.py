"""Unit tests for the access gate pipeline.

Each gate advances the request one stage; the first rejection stops the
pipeline. Gates refuse to run out of order.
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import AccountRole
from src.infrastructure.security.jwt_service import JWTService
from src.presentation.routers.api.middleware.access_gate import (
    GateContext,
    GateStage,
    authorize_roles,
    extract_bearer_token,
    run_gates,
    verify_access_token,
)
from tests.conftest import create_account


@pytest.fixture
def token_service():
    return JWTService(access_secret="k" * 40, refresh_secret="q" * 40)


def _pipeline(token_service, roles=()):
    return [
        extract_bearer_token,
        verify_access_token(token_service),
        authorize_roles(roles),
    ]


@pytest.mark.unit
class TestExtractBearerToken:
    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Basic abc", "abc"])
    def test_missing_or_malformed_header(self, header):
        result = extract_bearer_token(GateContext(authorization=header))

        assert isinstance(result, Failure)
        assert result.error.status_code == 401
        assert result.error.code == ErrorCode.TOKEN_MISSING
        assert result.error.message == "Token not provided"
        assert result.error.stage == GateStage.ANONYMOUS

    def test_scheme_is_case_insensitive(self):
        result = extract_bearer_token(GateContext(authorization="bearer abc.def"))

        assert isinstance(result, Success)
        assert result.value.token == "abc.def"
        assert result.value.stage == GateStage.TOKEN_PRESENT


@pytest.mark.unit
class TestRunGates:
    def test_valid_token_any_role(self, token_service):
        account = create_account(role=AccountRole.CEO)
        token = token_service.issue_access(account)

        result = run_gates(
            GateContext(authorization=f"Bearer {token}"), _pipeline(token_service)
        )

        assert isinstance(result, Success)
        assert result.value.stage == GateStage.ALLOWED
        assert result.value.claims.account_id == account.id

    def test_invalid_token_rejected_with_401(self, token_service):
        result = run_gates(
            GateContext(authorization="Bearer forged.token.value"),
            _pipeline(token_service),
        )

        assert isinstance(result, Failure)
        assert result.error.status_code == 401
        assert result.error.code == ErrorCode.TOKEN_INVALID
        assert result.error.stage == GateStage.TOKEN_PRESENT

    def test_refresh_token_cannot_open_gate(self, token_service):
        refresh = token_service.issue_refresh(create_account(role=AccountRole.ADMIN))

        result = run_gates(
            GateContext(authorization=f"Bearer {refresh}"),
            _pipeline(token_service, [AccountRole.ADMIN]),
        )

        assert isinstance(result, Failure)
        assert result.error.status_code == 401

    def test_role_not_allowed_names_roles(self, token_service):
        token = token_service.issue_access(create_account(role=AccountRole.USER))

        result = run_gates(
            GateContext(authorization=f"Bearer {token}"),
            _pipeline(token_service, [AccountRole.ADMIN, AccountRole.CEO]),
        )

        assert isinstance(result, Failure)
        assert result.error.status_code == 403
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert result.error.message == "Not allowed for USER, only for ADMIN, CEO"
        assert result.error.stage == GateStage.TOKEN_VALID

    def test_allowed_role_passes(self, token_service):
        token = token_service.issue_access(create_account(role=AccountRole.SUPER_ADMIN))

        result = run_gates(
            GateContext(authorization=f"Bearer {token}"),
            _pipeline(token_service, [AccountRole.ADMIN, AccountRole.SUPER_ADMIN]),
        )

        assert isinstance(result, Success)

    def test_missing_token_stops_before_verification(self, token_service):
        calls = []

        def spy_gate(context):
            calls.append(context)
            return Success(value=context)

        result = run_gates(GateContext(authorization=None), [extract_bearer_token, spy_gate])

        assert isinstance(result, Failure)
        assert calls == []


@pytest.mark.unit
class TestGateOrdering:
    def test_role_gate_requires_verified_token(self):
        with pytest.raises(RuntimeError, match="requires stage token_valid"):
            authorize_roles([AccountRole.ADMIN])(GateContext(authorization="Bearer x"))

    def test_verify_gate_requires_extracted_token(self, token_service):
        with pytest.raises(RuntimeError):
            verify_access_token(token_service)(GateContext(authorization="Bearer x"))
