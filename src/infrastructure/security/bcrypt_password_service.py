"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol (structural typing, no inheritance).

Security:
    - Random salt per hash, adaptive cost factor
    - Constant-time comparison on verify

Performance:
    Cost factor is logarithmic: each +1 doubles computation time.
    10 = ~60ms (default), 12 = ~250ms, 14 = ~1000ms. Hashing is CPU-bound,
    so handlers run it in a worker thread.
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("hello-world")
        password_service.verify_password("hello-world", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 10) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (4-31, bcrypt's supported range).

        Raises:
            ValueError: If cost factor is outside bcrypt's range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            60-character hash in ``$2b$<cost>$<salt><hash>`` format.

        Example:
            >>> service = BcryptPasswordService(cost_factor=10)
            >>> service.hash_password("hello") != service.hash_password("hello")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash. False on mismatch and for a hash
            that is not in bcrypt format.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            # Invalid hash format
            return False
