"""Security infrastructure adapters.

- Password hashing (bcrypt)
- Session token issuing and verification (PyJWT)
- Purpose-bound one-time passcodes (HMAC-based TOTP)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.totp_service import TotpService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "TotpService",
]
