"""
POS Pydantic Schemas

Schemas:
- PosBase: Shared fields
- PosCreate: Create a new point of sale
- PosResponse: POS data for API responses
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from campuscoffee.models.pos import CampusType, PosType


class PosBase(BaseModel):
    """Base schema with shared POS fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Display name of the point of sale",
        examples=["Schmelzpunkt", "Cafe Botanik"],
    )
    description: str | None = Field(
        default=None,
        max_length=2000,
        description="Short description",
    )
    pos_type: PosType = Field(
        default=PosType.CAFE,
        description="Kind of point of sale",
    )
    campus: CampusType = Field(..., description="Campus the POS is located on")
    street: str = Field(..., min_length=1, max_length=255)
    house_number: str = Field(..., min_length=1, max_length=16)
    postal_code: int = Field(..., ge=1000, le=99999)
    city: str = Field(..., min_length=1, max_length=255)


class PosCreate(PosBase):
    """Schema for creating a POS."""

    pass


class PosResponse(PosBase):
    """Schema for POS responses."""

    id: int = Field(..., description="Unique POS identifier")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
