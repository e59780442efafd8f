"""Account request and response schemas.

Pydantic schemas for account API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- Entity-to-schema conversion methods

The password hash never leaves the domain layer: no response schema has a
field for it.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.application.dtos import AccountPage
from src.domain.entities.account import Account
from src.domain.enums import PROMOTABLE_ROLES, AccountRole, AccountStatus
from src.domain.types import BirthYear, PersonName, PhoneNumber


# =============================================================================
# Request Schemas
# =============================================================================


class PromotionRequest(BaseModel):
    """Request schema for role promotion.

    POST /user/promotion (ADMIN)
    """

    user_id: UUID = Field(..., description="Account whose role changes")
    role: AccountRole = Field(..., description="ADMIN, SUPER-ADMIN or USER")

    @field_validator("role")
    @classmethod
    def validate_promotable(cls, v: AccountRole) -> AccountRole:
        if v not in PROMOTABLE_ROLES:
            allowed = ", ".join(sorted(role.value for role in PROMOTABLE_ROLES))
            raise ValueError(f"Role must be one of {allowed}")
        return v


class AccountUpdateRequest(BaseModel):
    """Request schema for profile update.

    PATCH /user/{id}

    Only fields present in the body are changed.
    """

    name: PersonName | None = None
    phone: PhoneNumber | None = None
    image: str | None = Field(None, max_length=512)
    year: BirthYear | None = None
    region_id: UUID | None = None

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, v: str | None) -> str:
        # Omit the field to keep the name; null would clear a required value
        if v is None:
            raise ValueError("name cannot be null")
        return v

    def to_changes(self) -> dict[str, Any]:
        """Profile changes keyed by entity field name."""
        changes = self.model_dump(exclude_unset=True)
        if "year" in changes:
            changes["birth_year"] = changes.pop("year")
        return changes


# =============================================================================
# Response Schemas
# =============================================================================


class AccountResponse(BaseModel):
    """Single account response.

    Attributes:
        id: Account unique identifier.
        name: Display name.
        email: Email address.
        phone: Phone number.
        role: Account role.
        status: Activation status.
        image: Profile image reference.
        year: Birth year.
        region_id: Region reference.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    email: str
    phone: str | None
    role: AccountRole
    status: AccountStatus
    image: str | None = None
    year: int | None = None
    region_id: UUID | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            phone=account.phone,
            role=account.role,
            status=account.status,
            image=account.image,
            year=account.birth_year,
            region_id=account.region_id,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AccountListResponse(BaseModel):
    """Paginated account list."""

    items: list[AccountResponse]
    total: int
    limit: int
    offset: int

    @classmethod
    def from_page(cls, page: AccountPage) -> "AccountListResponse":
        return cls(
            items=[AccountResponse.from_entity(account) for account in page.items],
            total=page.total,
            limit=page.limit,
            offset=page.offset,
        )


class PromotionResponse(BaseModel):
    """Response schema for role promotion."""

    message: str
    data: AccountResponse


class AccountDeleteResponse(BaseModel):
    """Response schema for account deletion."""

    deleted_data: AccountResponse
    message: str = "User deleted successfully"
