"""Services package."""

from whereabouts.services.init_service import initialize_database
from whereabouts.services.queries import (
    IndexLocations,
    Locations,
    Query,
    QueryError,
    QueryResult,
    Residents,
    ShowLocation,
    ShowLocationResidents,
    ShowLocationTimestamps,
    ShowLocationTimestampsRange,
    SingleLocation,
    StoreLocation,
    Success,
    TimeStamps,
    query,
)

__all__ = [
    "IndexLocations",
    "Locations",
    "Query",
    "QueryError",
    "QueryResult",
    "Residents",
    "ShowLocation",
    "ShowLocationResidents",
    "ShowLocationTimestamps",
    "ShowLocationTimestampsRange",
    "SingleLocation",
    "StoreLocation",
    "Success",
    "TimeStamps",
    "initialize_database",
    "query",
]
