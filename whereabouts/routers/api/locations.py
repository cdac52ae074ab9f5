"""Location endpoints.

Each handler runs a single query and expects one result variant back.
A failed query and an unexpected variant are reported the same way, as a
`LocationsError` carrying a fixed message for the operation.
"""

import logging
import typing as t

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from whereabouts.core.database import get_db
from whereabouts.schemas.location import LocationCreate, LocationResponse
from whereabouts.schemas.resident import ResidentResponse
from whereabouts.schemas.timestamp import TimeStampResponse
from whereabouts.services import (
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

LOGGER: logging.Logger = logging.getLogger(__name__)

ROUTER = APIRouter(prefix="/locations", tags=["Locations"])

# Largest value a SQLite INTEGER column can hold
MAX_LOCATION_ID: int = 2**63 - 1

LocationId = t.Annotated[
    int, Path(gt=0, le=MAX_LOCATION_ID, description="ID of the location")
]


class LocationsError(HTTPException):
    """Error returned by every location endpoint."""

    message: str

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: What the endpoint was unable to do.
        """
        self.message = message
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"A validation error occurred on the input: {message}",
        )


async def _run(db: AsyncSession, request: Query, message: str) -> QueryResult:
    """Run a query, reporting any failure as a `LocationsError`.

    Args:
        db (AsyncSession): The database session.
        request (Query): The query to run.
        message (str): The error message for this endpoint.

    Returns:
        QueryResult: Whatever variant the query produced.
    """
    try:
        return await query(db, request)
    except QueryError as exc:
        raise LocationsError(message) from exc


@ROUTER.get("", response_model=t.List[LocationResponse])
async def index(
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> t.List[LocationResponse]:
    """List all locations.

    Args:
        db (AsyncSession): The database session.

    Returns:
        List[LocationResponse]: Every location.
    """
    LOGGER.info("GET: locations controller")
    message: str = "Unable to retrieve locations"
    match await _run(db, IndexLocations(), message):
        case Locations(locations=locations):
            return locations
        case _:
            raise LocationsError(message)


@ROUTER.post("", response_model=str, status_code=status.HTTP_201_CREATED)
async def store(
    location: LocationCreate,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """Add a new location.

    Args:
        location (LocationCreate): The location data.
        db (AsyncSession): The database session.

    Returns:
        str: A confirmation message.
    """
    LOGGER.info("POST: locations controller")
    message: str = "Unable to add location"
    match await _run(db, StoreLocation(location=location), message):
        case Success():
            return "Location added successfully"
        case _:
            raise LocationsError(message)


@ROUTER.get("/{location_id}", response_model=LocationResponse)
async def show(
    location_id: LocationId,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> LocationResponse:
    """Get a location by ID.

    Args:
        location_id (int): The ID of the location.
        db (AsyncSession): The database session.

    Returns:
        LocationResponse: The location data.
    """
    LOGGER.info("GET: locations controller with id: %d", location_id)
    message: str = "Unable to retrieve location"
    match await _run(db, ShowLocation(location_id=location_id), message):
        case SingleLocation(location=location):
            return location
        case _:
            raise LocationsError(message)


@ROUTER.get(
    "/{location_id}/timestamps/{start}/{end}",
    response_model=t.List[TimeStampResponse],
)
async def show_location_timestamps_range(
    location_id: LocationId,
    start: str,
    end: str,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> t.List[TimeStampResponse]:
    """List the scans at a location between `start` and `end`.

    The bounds are passed through as received.

    Args:
        location_id (int): The ID of the location.
        start (str): Start of the range.
        end (str): End of the range.
        db (AsyncSession): The database session.

    Returns:
        List[TimeStampResponse]: Scans in the range.
    """
    LOGGER.info(
        "GET: locations controller timestamps with range for id: %d",
        location_id,
    )
    message: str = "Unable to retrieve timestamps"
    request = ShowLocationTimestampsRange(
        location_id=location_id, start=start, end=end
    )
    match await _run(db, request, message):
        case TimeStamps(timestamps=timestamps):
            return timestamps
        case _:
            raise LocationsError(message)


@ROUTER.get(
    "/{location_id}/timestamps", response_model=t.List[TimeStampResponse]
)
async def show_location_timestamps(
    location_id: LocationId,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> t.List[TimeStampResponse]:
    """List today's scans at a location.

    Args:
        location_id (int): The ID of the location.
        db (AsyncSession): The database session.

    Returns:
        List[TimeStampResponse]: Scans recorded today.
    """
    LOGGER.info(
        "GET: locations controller timestamps for id: %d", location_id
    )
    message: str = "Unable to retrieve timestamps"
    request = ShowLocationTimestamps(location_id=location_id)
    match await _run(db, request, message):
        case TimeStamps(timestamps=timestamps):
            return timestamps
        case _:
            raise LocationsError(message)


@ROUTER.get(
    "/{location_id}/residents", response_model=t.List[ResidentResponse]
)
async def show_location_residents(
    location_id: LocationId,
    db: t.Annotated[AsyncSession, Depends(get_db)],
) -> t.List[ResidentResponse]:
    """List the residents currently at a location.

    Args:
        location_id (int): The ID of the location.
        db (AsyncSession): The database session.

    Returns:
        List[ResidentResponse]: Residents at the location.
    """
    LOGGER.info(
        "GET: locations controller residents for id: %d", location_id
    )
    message: str = "Unable to retrieve residents"
    request = ShowLocationResidents(location_id=location_id)
    match await _run(db, request, message):
        case Residents(residents=residents):
            return residents
        case _:
            raise LocationsError(message)
