"""Schemas package."""

from whereabouts.schemas.location import (
    LocationBase,
    LocationCreate,
    LocationResponse,
)
from whereabouts.schemas.resident import ResidentResponse
from whereabouts.schemas.timestamp import TimeStampResponse

__all__ = [
    "LocationBase",
    "LocationCreate",
    "LocationResponse",
    "ResidentResponse",
    "TimeStampResponse",
]
