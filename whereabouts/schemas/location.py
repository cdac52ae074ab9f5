"""Pydantic schemas for location request/response validation."""

from pydantic import BaseModel, ConfigDict, Field


class LocationBase(BaseModel):
    """Base location schema."""

    name: str = Field(..., min_length=1, max_length=100)


class LocationCreate(LocationBase):
    """Schema for creating a new location."""


class LocationResponse(LocationBase):
    """Schema for location response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
