"""Time-based one-time passcode service (adapter).

Implements OtpProtocol without persistence. A code is a pure function of
(identity, purpose, time window, shared secret):

    key     = HMAC-SHA256(secret, identity || 0x00 || purpose)
    counter = floor(unix_time / step(purpose))
    code    = HOTP-truncate(HMAC-SHA256(key, counter)) mod 10^digits

Binding the purpose into the per-subject key means a code issued for email
verification can never be replayed against password reset. Verification
recomputes the codes for the current window and ``valid_window`` neighbours
on each side to absorb delivery delay and clock skew. Expired codes simply
stop matching; nothing needs to be revoked.
"""

import hashlib
import hmac
import time
from collections.abc import Mapping

from src.domain.enums import OtpPurpose

DEFAULT_STEP_SECONDS = 300


class TotpService:
    """Purpose-bound TOTP generator and verifier.

    Usage:
        from src.core.container import get_otp_service

        otp_service = get_otp_service()
        code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)
        otp_service.verify("a@x.com", OtpPurpose.EMAIL_VERIFICATION, code)  # True
    """

    def __init__(
        self,
        secret: str,
        *,
        digits: int = 5,
        step_seconds: Mapping[OtpPurpose, int] | None = None,
        default_step_seconds: int = DEFAULT_STEP_SECONDS,
        valid_window: int = 1,
    ) -> None:
        """Initialize TOTP service.

        Args:
            secret: Shared secret (from settings, never a literal).
            digits: Code length.
            step_seconds: Time window width per purpose.
            default_step_seconds: Window for purposes without an override.
            valid_window: Adjacent windows accepted on each side.

        Raises:
            ValueError: On an empty secret or non-positive window settings.
        """
        if not secret:
            raise ValueError("OTP secret must not be empty")
        if digits < 1:
            raise ValueError("digits must be positive")
        if default_step_seconds < 1:
            raise ValueError("default_step_seconds must be positive")
        if valid_window < 0:
            raise ValueError("valid_window must not be negative")

        steps = dict(step_seconds or {})
        if any(step < 1 for step in steps.values()):
            raise ValueError("step_seconds must be positive")

        self._secret = secret.encode("utf-8")
        self._digits = digits
        self._steps = steps
        self._default_step = default_step_seconds
        self._valid_window = valid_window

    def step_for(self, purpose: OtpPurpose) -> int:
        """Width of the time window for ``purpose`` in seconds."""
        return self._steps.get(purpose, self._default_step)

    def generate(self, identity: str, purpose: OtpPurpose) -> str:
        key = self._derive_key(identity, purpose)
        return self._code_at(key, self._counter(purpose))

    def verify(self, identity: str, purpose: OtpPurpose, code: str) -> bool:
        key = self._derive_key(identity, purpose)
        if not isinstance(code, str):
            return False
        candidate = code.strip()
        if len(candidate) != self._digits or not candidate.isdigit():
            return False

        counter = self._counter(purpose)
        matched = False
        for offset in range(-self._valid_window, self._valid_window + 1):
            expected = self._code_at(key, counter + offset)
            # No early exit: every window is compared
            matched |= hmac.compare_digest(expected, candidate)
        return matched

    def _derive_key(self, identity: str, purpose: OtpPurpose) -> bytes:
        """Per-subject key from the (identity, purpose) pair.

        Raises:
            ValueError: If identity is blank or purpose is not an OtpPurpose.
        """
        if not isinstance(identity, str) or not identity.strip():
            raise ValueError("OTP identity must be a non-empty string")
        if not isinstance(purpose, OtpPurpose):
            raise ValueError(f"Unknown OTP purpose: {purpose!r}")

        subject = b"\x00".join(
            (identity.strip().lower().encode("utf-8"), purpose.value.encode("utf-8"))
        )
        return hmac.new(self._secret, subject, hashlib.sha256).digest()

    def _counter(self, purpose: OtpPurpose) -> int:
        return int(time.time() // self.step_for(purpose))

    def _code_at(self, key: bytes, counter: int) -> str:
        digest = hmac.new(key, counter.to_bytes(8, "big"), hashlib.sha256).digest()
        offset = digest[-1] & 0x0F
        code_int = (int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF) % (
            10**self._digits
        )
        return str(code_int).zfill(self._digits)
