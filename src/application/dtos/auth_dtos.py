"""Authentication DTOs (Data Transfer Objects).

Carry handler results back to the presentation layer.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Token pair issued at login.

    Attributes:
        access_token: Short-lived JWT.
        refresh_token: Longer-lived JWT, signed with its own secret.
        token_type: Always "bearer".
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


@dataclass(frozen=True, kw_only=True)
class AccessToken:
    """Access token issued by a refresh."""

    access_token: str
    token_type: str = "bearer"
