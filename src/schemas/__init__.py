"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import RegisterRequest, LoginResponse
"""

from src.schemas.account_schemas import (
    AccountDeleteResponse,
    AccountListResponse,
    AccountResponse,
    AccountUpdateRequest,
    PromotionRequest,
    PromotionResponse,
)
from src.schemas.auth_schemas import (
    AccessTokenResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PasswordResetRequest,
    RefreshTokenRequest,
    RegisterRequest,
    RegisterResponse,
    ResendOtpRequest,
    ResetPasswordRequest,
    VerifyEmailRequest,
)
from src.schemas.region_schemas import RegionCreateRequest, RegionResponse

__all__ = [
    # Auth
    "RegisterRequest",
    "RegisterResponse",
    "VerifyEmailRequest",
    "ResendOtpRequest",
    "LoginRequest",
    "LoginResponse",
    "RefreshTokenRequest",
    "AccessTokenResponse",
    "PasswordResetRequest",
    "ResetPasswordRequest",
    "MessageResponse",
    # Accounts
    "AccountResponse",
    "AccountListResponse",
    "AccountUpdateRequest",
    "AccountDeleteResponse",
    "PromotionRequest",
    "PromotionResponse",
    # Regions
    "RegionCreateRequest",
    "RegionResponse",
]
