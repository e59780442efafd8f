"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("hello-world")
        is_valid = password_service.verify_password("hello-world", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password with a random salt.

        Returns:
            Hashed password string (bcrypt format: $2b$10$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (including a
            malformed hash).
        """
        ...
