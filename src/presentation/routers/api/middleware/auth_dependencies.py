"""JWT authentication dependencies.

FastAPI dependencies that run the access gate pipeline and expose the
verified caller to route handlers.

Usage:
    # Any authenticated role
    @router.get("/user/me")
    async def me(current_user: CurrentUser = Depends(get_current_user)):
        ...

    # Role-gated
    @router.post("/user/promotion")
    async def promote(
        current_user: CurrentUser = Depends(require_roles(AccountRole.ADMIN)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from src.core.container import get_token_service
from src.core.result import Failure
from src.domain.enums import AccountRole
from src.domain.protocols import TokenIssuerProtocol
from src.presentation.routers.api.middleware.access_gate import (
    GateContext,
    authorize_roles,
    extract_bearer_token,
    run_gates,
    verify_access_token,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller taken from verified access token claims.

    Attributes:
        account_id: Account id (token 'sub' claim).
        role: Role claim.
        token_jti: Token unique identifier.
    """

    account_id: UUID
    role: AccountRole
    token_jti: str

    def owns(self, account_id: UUID) -> bool:
        return self.account_id == account_id


def require_roles(*roles: AccountRole) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that admits callers whose role is in ``roles``.

    With no roles, any caller with a valid access token is admitted.

    Raises:
        HTTPException 401: Token missing, invalid or expired.
        HTTPException 403: Role not allowed; the message names the caller's
            role and the allowed roles.
    """

    async def role_checker(
        request: Request,
        token_service: Annotated[TokenIssuerProtocol, Depends(get_token_service)],
        authorization: Annotated[str | None, Header()] = None,
    ) -> CurrentUser:
        result = run_gates(
            GateContext(authorization=authorization),
            [
                extract_bearer_token,
                verify_access_token(token_service),
                authorize_roles(roles),
            ],
        )

        if isinstance(result, Failure):
            rejection = result.error
            headers = (
                {"WWW-Authenticate": "Bearer"}
                if rejection.status_code == status.HTTP_401_UNAUTHORIZED
                else None
            )
            raise HTTPException(
                status_code=rejection.status_code,
                detail=rejection.message,
                headers=headers,
            )

        claims = result.value.claims
        assert claims is not None
        current_user = CurrentUser(
            account_id=claims.account_id,
            role=claims.role,
            token_jti=claims.jti,
        )
        request.state.current_user = current_user
        return current_user

    return role_checker


get_current_user = require_roles()
"""Dependency admitting any caller with a valid access token."""
