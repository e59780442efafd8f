"""User router.

Endpoints:
    POST   /user/promotion - Change another account's role (ADMIN)
    GET    /user/me        - Caller's own account
    GET    /user/refresh   - Fresh access token for the caller
    GET    /user           - Paginated account list (ADMIN, CEO)
    GET    /user/{id}      - One account (ADMIN)
    PATCH  /user/{id}      - Update profile (self or ADMIN)
    DELETE /user/{id}      - Delete account (self or ADMIN)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.account_commands import (
    DeleteAccount,
    PromoteRole,
    ReissueAccessToken,
    UpdateAccountProfile,
)
from src.application.commands.handlers import (
    DeleteAccountHandler,
    PromoteRoleHandler,
    ReissueAccessTokenHandler,
    UpdateAccountProfileHandler,
)
from src.application.queries.account_queries import GetAccount, ListAccounts
from src.application.queries.handlers import GetAccountHandler, ListAccountsHandler
from src.core.container import (
    get_delete_account_handler,
    get_get_account_handler,
    get_list_accounts_handler,
    get_promote_role_handler,
    get_reissue_access_token_handler,
    get_update_account_profile_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.core.trace_context import get_trace_id
from src.domain.enums import AccountRole, AccountStatus
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
    require_roles,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.account_schemas import (
    AccountDeleteResponse,
    AccountListResponse,
    AccountResponse,
    AccountUpdateRequest,
    PromotionRequest,
    PromotionResponse,
)
from src.schemas.auth_schemas import AccessTokenResponse

router = APIRouter(prefix="/user", tags=["Users"])

_GATE_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Token missing, invalid or expired", "model": ProblemDetails},
    403: {"description": "Role not allowed", "model": ProblemDetails},
}


@router.post(
    "/promotion",
    response_model=PromotionResponse,
    responses={
        400: {"description": "Self promotion or unknown user", "model": ProblemDetails},
        **_GATE_RESPONSES,
    },
    summary="Change a user's role",
)
async def promote(
    request: Request,
    data: PromotionRequest,
    current_user: CurrentUser = Depends(require_roles(AccountRole.ADMIN)),
    handler: PromoteRoleHandler = Depends(get_promote_role_handler),
) -> PromotionResponse | JSONResponse:
    """Change another account's role.

    POST /user/promotion → 200 OK
    """
    command = PromoteRole(
        acting_account_id=current_user.account_id,
        target_account_id=data.user_id,
        role=data.role,
    )
    match await handler.handle(command):
        case Success(value=change):
            role = change.account.role.value
            message = (
                f"User's role has been successfully changed into {role}"
                if change.changed
                else f"This user is already {role}"
            )
            return PromotionResponse(
                message=message, data=AccountResponse.from_entity(change.account)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
                status_overrides={ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_400_BAD_REQUEST},
            )


@router.get(
    "/me",
    response_model=AccountResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}, **_GATE_RESPONSES},
    summary="Get own account",
)
async def get_me(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetAccountHandler = Depends(get_get_account_handler),
) -> AccountResponse | JSONResponse:
    match await handler.handle(GetAccount(account_id=current_user.account_id)):
        case Success(value=account):
            return AccountResponse.from_entity(account)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.get(
    "/refresh",
    response_model=AccessTokenResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}, **_GATE_RESPONSES},
    summary="Re-issue access token",
)
async def reissue_access_token(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ReissueAccessTokenHandler = Depends(get_reissue_access_token_handler),
) -> AccessTokenResponse | JSONResponse:
    """Issue a fresh access token carrying the caller's current role."""
    match await handler.handle(ReissueAccessToken(account_id=current_user.account_id)):
        case Success(value=token):
            return AccessTokenResponse(
                access_token=token.access_token, token_type=token.token_type
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.get(
    "",
    response_model=AccountListResponse,
    responses=_GATE_RESPONSES,
    summary="List users",
)
async def list_users(
    request: Request,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
    role: AccountRole | None = None,
    account_status: Annotated[AccountStatus | None, Query(alias="status")] = None,
    current_user: CurrentUser = Depends(require_roles(AccountRole.ADMIN, AccountRole.CEO)),
    handler: ListAccountsHandler = Depends(get_list_accounts_handler),
) -> AccountListResponse | JSONResponse:
    """List accounts page by page, optionally filtered by role and status."""
    query = ListAccounts(limit=limit, offset=offset, role=role, status=account_status)
    match await handler.handle(query):
        case Success(value=page):
            return AccountListResponse.from_page(page)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}, **_GATE_RESPONSES},
    summary="Get user",
)
async def get_user(
    request: Request,
    account_id: UUID,
    current_user: CurrentUser = Depends(require_roles(AccountRole.ADMIN)),
    handler: GetAccountHandler = Depends(get_get_account_handler),
) -> AccountResponse | JSONResponse:
    match await handler.handle(GetAccount(account_id=account_id)):
        case Success(value=account):
            return AccountResponse.from_entity(account)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.patch(
    "/{account_id}",
    response_model=AccountResponse,
    responses={
        403: {"description": "Not your account", "model": ProblemDetails},
        404: {"description": "User or region not found", "model": ProblemDetails},
        401: _GATE_RESPONSES[401],
    },
    summary="Update user profile",
)
async def update_user(
    request: Request,
    account_id: UUID,
    data: AccountUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: UpdateAccountProfileHandler = Depends(get_update_account_profile_handler),
) -> AccountResponse | JSONResponse:
    """Update profile fields. Accounts edit themselves; ADMIN edits anyone."""
    command = UpdateAccountProfile(
        acting_account_id=current_user.account_id,
        acting_role=current_user.role,
        target_account_id=account_id,
        changes=data.to_changes(),
    )
    match await handler.handle(command):
        case Success(value=account):
            return AccountResponse.from_entity(account)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.delete(
    "/{account_id}",
    response_model=AccountDeleteResponse,
    responses={
        403: {"description": "Not your account", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
        401: _GATE_RESPONSES[401],
    },
    summary="Delete user",
)
async def delete_user(
    request: Request,
    account_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: DeleteAccountHandler = Depends(get_delete_account_handler),
) -> AccountDeleteResponse | JSONResponse:
    """Delete an account. Accounts delete themselves; ADMIN deletes anyone."""
    command = DeleteAccount(
        acting_account_id=current_user.account_id,
        acting_role=current_user.role,
        target_account_id=account_id,
    )
    match await handler.handle(command):
        case Success(value=account):
            return AccountDeleteResponse(deleted_data=AccountResponse.from_entity(account))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )
