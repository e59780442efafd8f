"""Region domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Region:
    """Geographic region an account or learning center belongs to.

    Attributes:
        id: Unique identifier.
        name: Unique region name.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
