"""Repository implementations (adapters for hexagonal architecture)."""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.region_repository import (
    RegionRepository,
)

__all__ = [
    "AccountRepository",
    "RegionRepository",
]
