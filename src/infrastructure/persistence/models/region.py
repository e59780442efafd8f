"""Region database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Region(BaseMutableModel):
    """Region model.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        name: Unique region name
    """

    __tablename__ = "regions"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Region name (unique)",
    )
