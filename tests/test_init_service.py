"""Tests for demo data seeding."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from whereabouts.core.models import Location, Resident, TimeStamp
from whereabouts.services import init_service
from whereabouts.services.init_service import (
    DEMO_LOCATIONS,
    DEMO_RESIDENTS,
    seed_demo_data,
)
from whereabouts.utils.dates import as_utc


async def count(db: AsyncSession, column) -> int:
    return (
        await db.execute(select(func.count(column)))  # pylint: disable=E1102
    ).scalar_one()


async def test_seeds_empty_database(db: AsyncSession) -> None:
    assert await seed_demo_data(db) is True

    assert await count(db, Location.id) == len(DEMO_LOCATIONS)
    assert await count(db, Resident.id) == len(DEMO_RESIDENTS)
    assert await count(db, TimeStamp.id) == 2 * len(DEMO_RESIDENTS)


async def test_seeding_is_idempotent(db: AsyncSession) -> None:
    await seed_demo_data(db)

    assert await seed_demo_data(db) is False
    assert await count(db, Location.id) == len(DEMO_LOCATIONS)


async def test_earlier_scans_do_not_cross_midnight(
    db: AsyncSession, monkeypatch: pytest.MonkeyPatch
) -> None:
    # Seeding ten minutes after midnight
    midnight = datetime.now(timezone.utc) - timedelta(minutes=10)
    monkeypatch.setattr(
        init_service,
        "today_bounds",
        lambda tz: (midnight, midnight + timedelta(days=1)),
    )

    await seed_demo_data(db)

    scans = (await db.execute(select(TimeStamp))).scalars().all()
    assert min(as_utc(scan.timestamp) for scan in scans) == midnight
