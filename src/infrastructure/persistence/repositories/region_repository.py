"""RegionRepository - SQLAlchemy implementation of the RegionRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.region import Region
from src.domain.errors import RegionError
from src.infrastructure.persistence.models.region import Region as RegionModel


class RegionRepository:
    """SQLAlchemy implementation of RegionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, region_id: UUID) -> Region | None:
        stmt = select(RegionModel).where(RegionModel.id == region_id)
        result = await self.session.execute(stmt)
        region_model = result.scalar_one_or_none()

        if region_model is None:
            return None

        return self._to_domain(region_model)

    async def list_all(self) -> list[Region]:
        stmt = select(RegionModel).order_by(RegionModel.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, region: Region) -> Result[Region, DomainError]:
        region_model = RegionModel(
            id=region.id,
            name=region.name,
            created_at=region.created_at,
            updated_at=region.updated_at,
        )
        self.session.add(region_model)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGION_ALREADY_EXISTS,
                    message=RegionError.ALREADY_EXISTS,
                    resource_type="Region",
                    conflicting_field="name",
                )
            )

        await self.session.refresh(region_model)
        return Success(value=self._to_domain(region_model))

    def _to_domain(self, region_model: RegionModel) -> Region:
        return Region(
            id=region_model.id,
            name=region_model.name,
            created_at=region_model.created_at,
            updated_at=region_model.updated_at,
        )
