"""RegionRepository protocol for region persistence."""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.region import Region


class RegionRepository(Protocol):
    """Region repository protocol (port)."""

    async def find_by_id(self, region_id: UUID) -> Region | None:
        ...

    async def list_all(self) -> list[Region]:
        """All regions ordered by name."""
        ...

    async def create(self, region: Region) -> Result[Region, DomainError]:
        """Persist a new region.

        Returns:
            Failure(ConflictError) if a region with the same name exists.
        """
        ...
