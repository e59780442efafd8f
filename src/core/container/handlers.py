"""Handler dependency factories.

Request-scoped handler instances. Each handler gets repositories bound to
the request's database session plus the application-scoped services it
needs (password hashing, tokens, passcodes, notification dispatch, logger).

Usage:
    from fastapi import Depends
    from src.application.commands.handlers import LoginAccountHandler

    @router.post("/auth/login")
    async def login(
        handler: LoginAccountHandler = Depends(get_login_account_handler),
    ):
        result = await handler.handle(command)
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_notification_dispatcher,
    get_otp_service,
    get_password_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        CreateRegionHandler,
        DeleteAccountHandler,
        LoginAccountHandler,
        PromoteRoleHandler,
        RefreshAccessTokenHandler,
        RegisterAccountHandler,
        ReissueAccessTokenHandler,
        RequestPasswordResetHandler,
        ResendOtpHandler,
        ResetPasswordHandler,
        UpdateAccountProfileHandler,
        VerifyEmailHandler,
    )
    from src.application.queries.handlers import (
        GetAccountHandler,
        ListAccountsHandler,
        ListRegionsHandler,
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterAccountHandler":
    """Get RegisterAccount command handler (request-scoped).

    Dependencies:
    - AccountRepository, RegionRepository (request-scoped, use session)
    - BcryptPasswordService, TotpService (app-scoped singletons)
    - BackgroundNotificationDispatcher (app-scoped singleton)
    """
    from src.application.commands.handlers import RegisterAccountHandler
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        RegionRepository,
    )

    return RegisterAccountHandler(
        account_repo=AccountRepository(session=session),
        region_repo=RegionRepository(session=session),
        password_service=get_password_service(),
        otp_service=get_otp_service(),
        notification_dispatcher=get_notification_dispatcher(),
        logger=get_logger(),
    )


async def get_verify_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped)."""
    from src.application.commands.handlers import VerifyEmailHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return VerifyEmailHandler(
        account_repo=AccountRepository(session=session),
        otp_service=get_otp_service(),
        logger=get_logger(),
    )


async def get_resend_otp_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResendOtpHandler":
    """Get ResendOtp command handler (request-scoped)."""
    from src.application.commands.handlers import ResendOtpHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return ResendOtpHandler(
        account_repo=AccountRepository(session=session),
        otp_service=get_otp_service(),
        notification_dispatcher=get_notification_dispatcher(),
        logger=get_logger(),
    )


async def get_login_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginAccountHandler":
    """Get LoginAccount command handler (request-scoped)."""
    from src.application.commands.handlers import LoginAccountHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return LoginAccountHandler(
        account_repo=AccountRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_refresh_access_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers import RefreshAccessTokenHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return RefreshAccessTokenHandler(
        account_repo=AccountRepository(session=session),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped)."""
    from src.application.commands.handlers import RequestPasswordResetHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return RequestPasswordResetHandler(
        account_repo=AccountRepository(session=session),
        otp_service=get_otp_service(),
        notification_dispatcher=get_notification_dispatcher(),
        logger=get_logger(),
    )


async def get_reset_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped)."""
    from src.application.commands.handlers import ResetPasswordHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return ResetPasswordHandler(
        account_repo=AccountRepository(session=session),
        otp_service=get_otp_service(),
        password_service=get_password_service(),
        logger=get_logger(),
    )


# ============================================================================
# Account Administration Handler Factories
# ============================================================================


async def get_promote_role_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "PromoteRoleHandler":
    """Get PromoteRole command handler (request-scoped)."""
    from src.application.commands.handlers import PromoteRoleHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return PromoteRoleHandler(
        account_repo=AccountRepository(session=session),
        logger=get_logger(),
    )


async def get_update_account_profile_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateAccountProfileHandler":
    """Get UpdateAccountProfile command handler (request-scoped)."""
    from src.application.commands.handlers import UpdateAccountProfileHandler
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        RegionRepository,
    )

    return UpdateAccountProfileHandler(
        account_repo=AccountRepository(session=session),
        region_repo=RegionRepository(session=session),
        logger=get_logger(),
    )


async def get_delete_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteAccountHandler":
    """Get DeleteAccount command handler (request-scoped)."""
    from src.application.commands.handlers import DeleteAccountHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return DeleteAccountHandler(
        account_repo=AccountRepository(session=session),
        logger=get_logger(),
    )


async def get_reissue_access_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ReissueAccessTokenHandler":
    """Get ReissueAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers import ReissueAccessTokenHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return ReissueAccessTokenHandler(
        account_repo=AccountRepository(session=session),
        token_service=get_token_service(),
    )


async def get_get_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAccountHandler":
    """Get GetAccount query handler (request-scoped)."""
    from src.application.queries.handlers import GetAccountHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return GetAccountHandler(account_repo=AccountRepository(session=session))


async def get_list_accounts_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListAccountsHandler":
    """Get ListAccounts query handler (request-scoped)."""
    from src.application.queries.handlers import ListAccountsHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return ListAccountsHandler(account_repo=AccountRepository(session=session))


# ============================================================================
# Region Handler Factories
# ============================================================================


async def get_create_region_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateRegionHandler":
    """Get CreateRegion command handler (request-scoped)."""
    from src.application.commands.handlers import CreateRegionHandler
    from src.infrastructure.persistence.repositories import RegionRepository

    return CreateRegionHandler(
        region_repo=RegionRepository(session=session),
        logger=get_logger(),
    )


async def get_list_regions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListRegionsHandler":
    """Get ListRegions query handler (request-scoped)."""
    from src.application.queries.handlers import ListRegionsHandler
    from src.infrastructure.persistence.repositories import RegionRepository

    return ListRegionsHandler(region_repo=RegionRepository(session=session))
