"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_login_account_handler, ...

The container is organized into modules:
- infrastructure: Core services (db, hashing, tokens, passcodes, notifications, logging)
- handlers: Command and query handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_notification_dispatcher,
    get_otp_service,
    get_password_service,
    get_sms_service,
    get_token_service,
)


# Handlers
from src.core.container.handlers import (
    get_create_region_handler,
    get_delete_account_handler,
    get_get_account_handler,
    get_list_accounts_handler,
    get_list_regions_handler,
    get_login_account_handler,
    get_promote_role_handler,
    get_refresh_access_token_handler,
    get_register_account_handler,
    get_reissue_access_token_handler,
    get_request_password_reset_handler,
    get_resend_otp_handler,
    get_reset_password_handler,
    get_update_account_profile_handler,
    get_verify_email_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_password_service",
    "get_token_service",
    "get_otp_service",
    "get_email_service",
    "get_sms_service",
    "get_notification_dispatcher",
    "get_logger",
    # Handlers
    "get_create_region_handler",
    "get_delete_account_handler",
    "get_get_account_handler",
    "get_list_accounts_handler",
    "get_list_regions_handler",
    "get_login_account_handler",
    "get_promote_role_handler",
    "get_refresh_access_token_handler",
    "get_register_account_handler",
    "get_reissue_access_token_handler",
    "get_request_password_reset_handler",
    "get_resend_otp_handler",
    "get_reset_password_handler",
    "get_update_account_profile_handler",
    "get_verify_email_handler",
]
