"""Query execution for locations, residents and tag scans.

Every operation is described by one of the `Query` variants and answered
with one of the `QueryResult` variants. Failures of any kind surface as
`QueryError`.
"""

import logging
import typing as t
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from whereabouts.core.models import Location, Resident, TimeStamp
from whereabouts.schemas.location import LocationCreate, LocationResponse
from whereabouts.schemas.resident import ResidentResponse
from whereabouts.schemas.timestamp import TimeStampResponse
from whereabouts.utils.dates import (
    get_timezone,
    parse_range_bound,
    today_bounds,
)

LOGGER: logging.Logger = logging.getLogger(__name__)


class QueryError(Exception):
    """Exception raised when a query cannot be answered."""


# Requests


@dataclass(frozen=True)
class IndexLocations:
    """List every location."""


@dataclass(frozen=True)
class StoreLocation:
    """Insert a new location."""

    location: LocationCreate


@dataclass(frozen=True)
class ShowLocation:
    """Fetch a single location."""

    location_id: int


@dataclass(frozen=True)
class ShowLocationTimestamps:
    """Fetch today's scans at a location."""

    location_id: int


@dataclass(frozen=True)
class ShowLocationTimestampsRange:
    """Fetch the scans at a location between two raw bounds."""

    location_id: int
    start: str
    end: str


@dataclass(frozen=True)
class ShowLocationResidents:
    """Fetch the residents currently at a location."""

    location_id: int


Query = t.Union[
    IndexLocations,
    StoreLocation,
    ShowLocation,
    ShowLocationTimestamps,
    ShowLocationTimestampsRange,
    ShowLocationResidents,
]


# Results


@dataclass(frozen=True)
class Locations:
    """A collection of locations."""

    locations: t.List[LocationResponse] = field(default_factory=list)


@dataclass(frozen=True)
class SingleLocation:
    """Exactly one location."""

    location: LocationResponse


@dataclass(frozen=True)
class Success:
    """Acknowledgement of a write."""


@dataclass(frozen=True)
class TimeStamps:
    """A collection of tag scans."""

    timestamps: t.List[TimeStampResponse] = field(default_factory=list)


@dataclass(frozen=True)
class Residents:
    """A collection of residents."""

    residents: t.List[ResidentResponse] = field(default_factory=list)


QueryResult = t.Union[
    Locations,
    SingleLocation,
    Success,
    TimeStamps,
    Residents,
]


async def query(db: AsyncSession, request: Query) -> QueryResult:
    """Execute a query against the database.

    Args:
        db (AsyncSession): The database session borrowed for this request.
        request (Query): The operation to perform.

    Returns:
        QueryResult: The variant matching the request.

    Raises:
        QueryError: If the database fails or the request cannot be answered.
    """
    try:
        match request:
            case IndexLocations():
                return await _index_locations(db)
            case StoreLocation(location=location):
                return await _store_location(db, location)
            case ShowLocation(location_id=location_id):
                return await _show_location(db, location_id)
            case ShowLocationTimestamps(location_id=location_id):
                start, end = today_bounds(get_timezone())
                return await _timestamps_between(db, location_id, start, end)
            case ShowLocationTimestampsRange(
                location_id=location_id, start=start, end=end
            ):
                return await _timestamps_in_range(db, location_id, start, end)
            case ShowLocationResidents(location_id=location_id):
                return await _location_residents(db, location_id)
            case _:
                raise QueryError(f"Unsupported query: {request!r}")
    except SQLAlchemyError as exc:
        LOGGER.error("Database error while running %r: %s", request, exc)
        raise QueryError(str(exc)) from exc


async def _index_locations(db: AsyncSession) -> Locations:
    result: t.Sequence[Location] = (
        (await db.execute(select(Location).order_by(Location.id)))
        .scalars()
        .all()
    )
    return Locations(
        locations=[LocationResponse.model_validate(loc) for loc in result]
    )


async def _store_location(db: AsyncSession, data: LocationCreate) -> Success:
    location: Location = Location(name=data.name)
    db.add(location)
    try:
        await db.flush()
    except IntegrityError as exc:
        await db.rollback()
        LOGGER.warning("Location '%s' was rejected: %s", data.name, exc.orig)
        raise QueryError(f"Location '{data.name}' already exists") from exc

    LOGGER.info("Created location: %s (ID: %d)", location.name, location.id)
    return Success()


async def _show_location(
    db: AsyncSession, location_id: int
) -> SingleLocation:
    location: Location | None = await db.get(Location, location_id)
    if location is None:
        LOGGER.debug("Location %d not found", location_id)
        raise QueryError(f"Location with ID {location_id} not found")
    return SingleLocation(location=LocationResponse.model_validate(location))


async def _timestamps_in_range(
    db: AsyncSession, location_id: int, start: str, end: str
) -> TimeStamps:
    tz: tzinfo = get_timezone()
    try:
        lower: datetime = parse_range_bound(start, tz)
        upper: datetime = parse_range_bound(end, tz, end=True)
    except (ValueError, OverflowError) as exc:
        LOGGER.warning("Invalid range %r..%r: %s", start, end, exc)
        raise QueryError(f"Invalid range: {start} to {end}") from exc

    if lower > upper:
        raise QueryError(f"Range start {start} is after end {end}")

    result: t.Sequence[TimeStamp] = (
        (
            await db.execute(
                select(TimeStamp)
                .where(
                    TimeStamp.location == location_id,
                    TimeStamp.timestamp.between(lower, upper),
                )
                .order_by(TimeStamp.timestamp)
            )
        )
        .scalars()
        .all()
    )
    return TimeStamps(
        timestamps=[TimeStampResponse.model_validate(ts) for ts in result]
    )


async def _timestamps_between(
    db: AsyncSession, location_id: int, start: datetime, end: datetime
) -> TimeStamps:
    result: t.Sequence[TimeStamp] = (
        (
            await db.execute(
                select(TimeStamp)
                .where(
                    TimeStamp.location == location_id,
                    TimeStamp.timestamp >= start,
                    TimeStamp.timestamp < end,
                )
                .order_by(TimeStamp.timestamp)
            )
        )
        .scalars()
        .all()
    )
    return TimeStamps(
        timestamps=[TimeStampResponse.model_validate(ts) for ts in result]
    )


async def _location_residents(
    db: AsyncSession, location_id: int
) -> Residents:
    result: t.Sequence[Resident] = (
        (
            await db.execute(
                select(Resident)
                .where(Resident.current_location == location_id)
                .order_by(Resident.name)
            )
        )
        .scalars()
        .all()
    )
    return Residents(
        residents=[ResidentResponse.model_validate(res) for res in result]
    )
