"""Domain entities."""

from src.domain.entities.account import PROFILE_FIELDS, Account
from src.domain.entities.region import Region

__all__ = ["Account", "PROFILE_FIELDS", "Region"]
