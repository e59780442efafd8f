"""Declarative base for the identity tables.

Every table gets a uuid7 primary key plus ``created_at`` and ``updated_at``
maintained by PostgreSQL. Domain entities do not inherit from these;
repositories map between the two.
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Declarative root holding the shared metadata."""


class BaseMutableModel(BaseModel):
    """Abstract table with id and both timestamps.

    Usage:
        class User(BaseMutableModel):
            __tablename__ = "users"
            email: Mapped[str]
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
