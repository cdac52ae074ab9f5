"""Pydantic schemas for residents."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class ResidentResponse(BaseModel):
    """Schema for resident response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    rfid: str
    name: str
    room: str
    doc: date | None = None
    current_location: int | None = None
