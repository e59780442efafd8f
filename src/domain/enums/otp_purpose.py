"""Purposes a one-time passcode can be issued for.

The purpose is part of the passcode derivation key, so a code issued for
one purpose never verifies for another.
"""

from enum import Enum


class OtpPurpose(str, Enum):
    """Flow a one-time passcode belongs to."""

    EMAIL_VERIFICATION = "email"
    PASSWORD_RESET = "reset_password"
