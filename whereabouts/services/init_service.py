"""Initialization service for seeding database with demo data."""

import logging
import typing as t
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from whereabouts.core.config import SETTINGS
from whereabouts.core.models import Location, Resident, TimeStamp
from whereabouts.utils.dates import get_timezone, today_bounds

LOGGER: logging.Logger = logging.getLogger(__name__)

DEMO_LOCATIONS: t.List[str] = ["Dining Room", "Garden", "Lounge"]

DEMO_RESIDENTS: t.List[t.Tuple[str, str, str, date, str]] = [
    ("04A1B2C3", "Alice Martin", "101", date(1938, 4, 12), "Lounge"),
    ("04D4E5F6", "Bernard Okafor", "102", date(1941, 9, 3), "Garden"),
    ("04A7B8C9", "Clara Jensen", "205", date(1935, 1, 27), "Lounge"),
]


async def seed_demo_data(db: AsyncSession) -> bool:
    """Insert demo locations, residents and scans into an empty database.

    Args:
        db (AsyncSession): The database session.

    Returns:
        bool: True if data was inserted, False if locations already exist.
    """
    existing: int = (
        await db.execute(
            select(func.count(Location.id))  # pylint: disable=not-callable
        )
    ).scalar() or 0
    if existing > 0:
        LOGGER.debug("Found %d locations, skipping demo data", existing)
        return False

    locations: t.Dict[str, Location] = {
        name: Location(name=name) for name in DEMO_LOCATIONS
    }
    db.add_all(locations.values())
    await db.flush()

    now: datetime = datetime.now(timezone.utc)
    # Never earlier than midnight, so both scans count as today
    earlier: datetime = max(
        now - timedelta(minutes=45), today_bounds(get_timezone())[0]
    )
    for rfid, name, room, doc, location_name in DEMO_RESIDENTS:
        location: Location = locations[location_name]
        db.add(
            Resident(
                rfid=rfid,
                name=name,
                room=room,
                doc=doc,
                current_location=location.id,
            )
        )
        await db.flush()
        # One scan on arrival, plus an earlier one at the dining room
        db.add(TimeStamp(rfid=rfid, location=location.id, timestamp=now))
        db.add(
            TimeStamp(
                rfid=rfid,
                location=locations["Dining Room"].id,
                timestamp=earlier,
            )
        )

    await db.flush()
    LOGGER.info(
        "Inserted %d demo locations and %d demo residents",
        len(DEMO_LOCATIONS),
        len(DEMO_RESIDENTS),
    )
    return True


async def initialize_database(db: AsyncSession) -> None:
    """Initialize the database with default data.

    This function should be called at application startup. Demo data is
    only written when `seed_demo_data` is enabled.

    Args:
        db (AsyncSession): The database session.
    """
    LOGGER.info("Running database initialization...")

    if SETTINGS.seed_demo_data:
        await seed_demo_data(db)

    await db.commit()
    LOGGER.info("Database initialization complete")
