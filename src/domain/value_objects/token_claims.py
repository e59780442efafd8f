"""Verified session token claims."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import AccountRole, TokenType


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Claims of a session token whose signature and expiry were verified.

    Attributes:
        account_id: Subject of the token.
        role: Role at the time the token was issued.
        token_type: Access or refresh.
        issued_at: Issue time.
        expires_at: Expiry time.
        jti: Unique token id.
    """

    account_id: UUID
    role: AccountRole
    token_type: TokenType
    issued_at: datetime
    expires_at: datetime
    jti: str
