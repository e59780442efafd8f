"""Database models for the persistence layer.

Models map to tables and stay in the infrastructure layer; repositories
convert them to and from the domain entities in ``src/domain/entities``.

Models:
    - user.py: accounts
    - region.py: regions
"""

from src.infrastructure.persistence.models.region import Region
from src.infrastructure.persistence.models.user import User

__all__ = ["Region", "User"]
