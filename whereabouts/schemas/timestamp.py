"""Pydantic schemas for tag scan timestamps."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


class TimeStampResponse(BaseModel):
    """Schema for a recorded tag scan."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    rfid: str
    location: int
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Mark naive values as UTC (SQLite drops the offset on read).

        Args:
            value (datetime): The stored timestamp.

        Returns:
            datetime: A timezone-aware timestamp.
        """
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
