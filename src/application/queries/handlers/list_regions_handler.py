"""ListRegions query handler."""

from src.application.queries.region_queries import ListRegions
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities.region import Region
from src.domain.protocols import RegionRepository


class ListRegionsHandler:
    """Handler for ListRegions query."""

    def __init__(self, region_repo: RegionRepository) -> None:
        self._region_repo = region_repo

    async def handle(self, query: ListRegions) -> Result[list[Region], DomainError]:
        return Success(value=await self._region_repo.list_all())
