"""Command handlers."""

from src.application.commands.handlers.create_region_handler import CreateRegionHandler
from src.application.commands.handlers.delete_account_handler import DeleteAccountHandler
from src.application.commands.handlers.login_account_handler import LoginAccountHandler
from src.application.commands.handlers.promote_role_handler import PromoteRoleHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_account_handler import (
    RegisterAccountHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.resend_otp_handler import ResendOtpHandler
from src.application.commands.handlers.reissue_access_token_handler import (
    ReissueAccessTokenHandler,
)
from src.application.commands.handlers.reset_password_handler import ResetPasswordHandler
from src.application.commands.handlers.update_account_profile_handler import (
    UpdateAccountProfileHandler,
)
from src.application.commands.handlers.verify_email_handler import VerifyEmailHandler

__all__ = [
    "CreateRegionHandler",
    "DeleteAccountHandler",
    "LoginAccountHandler",
    "PromoteRoleHandler",
    "RefreshAccessTokenHandler",
    "RegisterAccountHandler",
    "ReissueAccessTokenHandler",
    "RequestPasswordResetHandler",
    "ResendOtpHandler",
    "ResetPasswordHandler",
    "UpdateAccountProfileHandler",
    "VerifyEmailHandler",
]
