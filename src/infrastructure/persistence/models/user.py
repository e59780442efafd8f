"""User database model.

Stores account records behind the Account domain entity.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - status: INACTIVE until the email passcode is confirmed
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.enums import AccountRole, AccountStatus
from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        name: Display name
        email: Unique email address (lowercase, indexed)
        phone: International phone number
        password_hash: Bcrypt hash (NEVER plaintext)
        role: USER, ADMIN, SUPER-ADMIN or CEO
        status: INACTIVE or ACTIVE
        image: Profile image reference
        year: Birth year
        region_id: Region reference (nullable, SET NULL on region delete)

    Indexes:
        - ix_users_email (unique): login and registration lookups; the
          unique constraint is what settles concurrent registrations
        - ix_users_role: admin listings filtered by role
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    phone: Mapped[str | None] = mapped_column(
        String(13),
        nullable=True,
        comment="International phone number",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=AccountRole.USER.value,
        index=True,
        comment="USER, ADMIN, SUPER-ADMIN or CEO",
    )

    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=AccountStatus.INACTIVE.value,
        comment="INACTIVE until email verification, then ACTIVE",
    )

    image: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        comment="Profile image reference",
    )

    year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Birth year",
    )

    region_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("regions.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
