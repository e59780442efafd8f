"""JWT token service (adapter).

Implements TokenIssuerProtocol using PyJWT with HMAC-SHA256.

Security:
    - Access and refresh tokens are signed with distinct secrets, so a
      token of one class never verifies as the other
    - Secrets come from settings and must be at least 256 bits
    - ``type`` claim is checked on verification as a second guard
    - Unique JWT ID (jti) per token

Claims:
    sub  - account id (string UUID)
    role - account role at issue time
    type - "access" or "refresh"
    iat, exp, jti
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums import AccountRole, TokenType
from src.domain.value_objects import TokenClaims

MIN_SECRET_BYTES = 32
REQUIRED_CLAIMS = ["sub", "role", "type", "iat", "exp", "jti"]


class JWTService:
    """JWT token issuing and verification service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        access_token = token_service.issue_access(account)

        match token_service.verify_access(access_token):
            case Success(value=claims):
                ...
            case Failure(error=error):
                # error.code is TOKEN_EXPIRED or TOKEN_INVALID
                ...
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_expire_minutes: int = 120,
        refresh_expire_days: int = 1,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            access_secret: Signing key for access tokens (>= 32 bytes).
            refresh_secret: Signing key for refresh tokens (>= 32 bytes).
            access_expire_minutes: Access token lifetime.
            refresh_expire_days: Refresh token lifetime.
            algorithm: HMAC algorithm name.

        Raises:
            ValueError: If a secret is too short or both secrets are equal.
        """
        for secret in (access_secret, refresh_secret):
            if len(secret.encode("utf-8")) < MIN_SECRET_BYTES:
                msg = "JWT secret key must be at least 32 bytes (256 bits)"
                raise ValueError(msg)
        if access_secret == refresh_secret:
            msg = "Access and refresh tokens must use different secrets"
            raise ValueError(msg)

        self._secrets = {
            TokenType.ACCESS: access_secret,
            TokenType.REFRESH: refresh_secret,
        }
        self._lifetimes = {
            TokenType.ACCESS: timedelta(minutes=access_expire_minutes),
            TokenType.REFRESH: timedelta(days=refresh_expire_days),
        }
        self._algorithm = algorithm

    def issue_access(self, account: Account) -> str:
        return self._issue(account, TokenType.ACCESS)

    def issue_refresh(self, account: Account) -> str:
        return self._issue(account, TokenType.REFRESH)

    def verify_access(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        return self._verify(token, TokenType.ACCESS)

    def verify_refresh(self, token: str) -> Result[TokenClaims, AuthenticationError]:
        return self._verify(token, TokenType.REFRESH)

    def _issue(self, account: Account, token_type: TokenType) -> str:
        now = datetime.now(UTC)
        expires_at = now + self._lifetimes[token_type]

        payload = {
            "sub": str(account.id),
            "role": account.role.value,
            "type": token_type.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(
            payload, self._secrets[token_type], algorithm=self._algorithm
        )
        return token

    def _verify(
        self, token: str, token_type: TokenType
    ) -> Result[TokenClaims, AuthenticationError]:
        """Decode a token of the expected class.

        PyJWT validates the signature and the exp claim; expiry is reported
        separately so refresh flows can tell a stale token from a forged one.
        """
        try:
            payload = jwt.decode(
                token,
                self._secrets[token_type],
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Token expired",
                )
            )
        except InvalidTokenError:
            return Failure(error=_invalid_token())

        if payload.get("type") != token_type.value:
            return Failure(error=_invalid_token())

        try:
            claims = TokenClaims(
                account_id=UUID(str(payload["sub"])),
                role=AccountRole(payload["role"]),
                token_type=token_type,
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
                jti=str(payload["jti"]),
            )
        except (ValueError, TypeError):
            # Signed by us but with claims we no longer understand
            return Failure(error=_invalid_token())

        return Success(value=claims)


def _invalid_token() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.TOKEN_INVALID,
        message="Invalid token",
    )
