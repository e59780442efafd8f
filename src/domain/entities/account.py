"""Account domain entity.

Pure business logic, no framework dependencies. An account is the long-lived
aggregate behind every identity operation: one-time passcodes and session
tokens are derived from it and never stored on it.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import AccountRole, AccountStatus

PROFILE_FIELDS: frozenset[str] = frozenset(
    {"name", "phone", "image", "birth_year", "region_id"}
)
"""Fields an account holder (or an administrator) may edit after registration."""


@dataclass
class Account:
    """Registered principal.

    Business Rules:
        - Email is unique across all accounts (enforced by the store)
        - New accounts are INACTIVE until the email passcode is confirmed
        - Status only moves INACTIVE -> ACTIVE
        - Only ACTIVE accounts may log in
        - ``password_hash`` is a bcrypt hash, never the plaintext

    Attributes:
        id: Unique, immutable identifier.
        name: Display name.
        email: Normalized (lowercase) email address.
        phone: International phone number.
        password_hash: Bcrypt hash of the password.
        role: Role checked by the access gate.
        status: Activation status.
        image: Profile image reference.
        birth_year: Year of birth.
        region_id: Region the account belongs to.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    email: str
    phone: str | None
    password_hash: str
    role: AccountRole
    status: AccountStatus
    created_at: datetime
    updated_at: datetime
    image: str | None = None
    birth_year: int | None = None
    region_id: UUID | None = None

    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    def can_login(self) -> bool:
        """Only verified accounts may obtain session tokens."""
        return self.is_active()

    def activate(self) -> bool:
        """Mark the account verified.

        Returns:
            bool: True if the status changed, False if already ACTIVE.
        """
        if self.is_active():
            return False
        self.status = AccountStatus.ACTIVE
        self._touch()
        return True

    def change_role(self, role: AccountRole) -> bool:
        """Assign a new role.

        Returns:
            bool: True if the role changed, False if it already was ``role``.
        """
        if self.role == role:
            return False
        self.role = role
        self._touch()
        return True

    def change_password_hash(self, password_hash: str) -> None:
        self.password_hash = password_hash
        self._touch()

    def update_profile(self, **changes: object) -> None:
        """Apply profile changes.

        Raises:
            ValueError: If a change targets a field outside the profile.
        """
        unknown = set(changes) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Not a profile field: {', '.join(sorted(unknown))}")
        for field_name, value in changes.items():
            setattr(self, field_name, value)
        self._touch()

    def is_owned_by(self, account_id: UUID) -> bool:
        return self.id == account_id

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
