"""Region request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.region import Region


class RegionCreateRequest(BaseModel):
    """Request schema for region creation.

    POST /region (ADMIN)
    """

    name: str = Field(..., min_length=1, max_length=100, examples=["Tashkent"])


class RegionResponse(BaseModel):
    """Single region response."""

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, region: Region) -> "RegionResponse":
        return cls(
            id=region.id,
            name=region.name,
            created_at=region.created_at,
            updated_at=region.updated_at,
        )
