"""Result DTOs returned by handlers."""

from src.application.dtos.account_dtos import AccountPage, RoleChange
from src.application.dtos.auth_dtos import AccessToken, AuthTokens

__all__ = ["AccessToken", "AccountPage", "AuthTokens", "RoleChange"]
