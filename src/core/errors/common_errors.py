"""Common error classes used across all layers.

Error Types:
- ValidationError: malformed or missing input
- NotFoundError: referenced record does not exist
- ConflictError: duplicate unique value or conflicting state
- AuthenticationError: credential, passcode or token failures
- AuthorizationError: authenticated caller lacks permission

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message="User not found",
        resource_type="Account",
        resource_id=email,
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending field, when known.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Referenced record does not exist.

    Attributes:
        resource_type: Kind of record (Account, Region).
        resource_id: Identifier that was looked up (id or email).
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Duplicate value or state conflict.

    Attributes:
        resource_type: Kind of record in conflict.
        conflicting_field: Field holding the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Wrong password, wrong passcode, unverified account or bad token."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authenticated caller is not permitted to perform the operation.

    Attributes:
        required_permission: Role or rule that was required.
    """

    required_permission: str | None = None
