"""Session token classes."""

from enum import Enum


class TokenType(str, Enum):
    """Session token class, carried in the ``type`` claim.

    Each class is signed with its own secret.
    """

    ACCESS = "access"
    REFRESH = "refresh"
