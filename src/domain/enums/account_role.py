"""Account roles for role-gated endpoints.

Roles:
    - USER: learner browsing centers (default)
    - CEO: owner of a learning center; registers with an extended profile
    - ADMIN: platform administrator (promotes roles, manages regions)
    - SUPER-ADMIN: elevated administrator, reachable only through promotion

Usage:
    from src.domain.enums import AccountRole

    if account.role == AccountRole.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class AccountRole(str, Enum):
    """Account roles.

    String enum, values are the exact strings stored in the database and
    carried in token claims.
    """

    USER = "USER"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER-ADMIN"
    CEO = "CEO"


SELF_REGISTRATION_ROLES: frozenset[AccountRole] = frozenset(
    {AccountRole.USER, AccountRole.CEO}
)
"""Roles a visitor may choose when registering."""

PROMOTABLE_ROLES: frozenset[AccountRole] = frozenset(
    {AccountRole.ADMIN, AccountRole.SUPER_ADMIN, AccountRole.USER}
)
"""Roles an administrator may assign through promotion."""
