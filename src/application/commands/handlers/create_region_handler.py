"""Region creation handler."""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.region_commands import CreateRegion
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities.region import Region
from src.domain.protocols import LoggerProtocol, RegionRepository


class CreateRegionHandler:
    """Handler for CreateRegion command."""

    def __init__(self, region_repo: RegionRepository, logger: LoggerProtocol) -> None:
        self._region_repo = region_repo
        self._logger = logger

    async def handle(self, cmd: CreateRegion) -> Result[Region, DomainError]:
        """Create a region.

        Returns:
            Success(Region).
            Failure(ConflictError) if the name is taken.
        """
        now = datetime.now(UTC)
        result = await self._region_repo.create(
            Region(id=uuid7(), name=cmd.name.strip(), created_at=now, updated_at=now)
        )
        if isinstance(result, Success):
            self._logger.info("region_created", region_id=str(result.value.id))
        return result
