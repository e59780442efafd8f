"""Token issuer protocol for domain layer.

Session tokens are self-contained signed claim sets in two classes:
short-lived access tokens and longer-lived refresh tokens. Both are
stateless: there is no server-side revocation list, so invalidation only
happens through expiry.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
"""

from typing import Protocol

from src.core.errors import AuthenticationError
from src.core.result import Result
from src.domain.entities.account import Account
from src.domain.value_objects import TokenClaims


class TokenIssuerProtocol(Protocol):
    """Mint and verify session tokens.

    Verification distinguishes the two failure modes through the error code:
    ``TOKEN_EXPIRED`` for a well-signed token past its expiry and
    ``TOKEN_INVALID`` for anything else (bad signature, malformed token,
    wrong token class).

    Usage:
        token = token_issuer.issue_access(account)
        match token_issuer.verify_access(token):
            case Success(value=claims):
                account_id = claims.account_id
            case Failure(error=error):
                ...
    """

    def issue_access(self, account: Account) -> str:
        """Mint an access token carrying the account id and role."""
        ...

    def issue_refresh(self, account: Account) -> str:
        """Mint a refresh token carrying the account id and role."""
        ...

    def verify_access(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        """Verify an access token's signature, expiry and class."""
        ...

    def verify_refresh(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        """Verify a refresh token's signature, expiry and class."""
        ...
