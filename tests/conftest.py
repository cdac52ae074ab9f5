"""Shared fixtures: an in-memory database and an HTTP client bound to it."""

import typing as t
from datetime import date, datetime, timedelta, timezone

import httpx
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from whereabouts.core.database import Base, get_db
from whereabouts.core.models import Location, Resident, TimeStamp
from whereabouts.main import APPLICATION

SessionMaker = async_sessionmaker[AsyncSession]


@pytest.fixture
async def engine() -> t.AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> SessionMaker:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(
    session_maker: SessionMaker,
) -> t.AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(
    session_maker: SessionMaker,
) -> t.AsyncGenerator[httpx.AsyncClient, None]:
    async def override_get_db() -> t.AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    APPLICATION.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=APPLICATION)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://test"
    ) as http_client:
        yield http_client
    APPLICATION.dependency_overrides.clear()


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
async def seeded(session_maker: SessionMaker, now: datetime) -> t.Dict:
    """Two locations, three residents and a handful of scans.

    Returns ids keyed by name so tests do not depend on insert order.
    """
    async with session_maker() as session:
        lounge = Location(name="Lounge")
        garden = Location(name="Garden")
        session.add_all([lounge, garden])
        await session.flush()

        session.add_all(
            [
                Resident(
                    rfid="AA01",
                    name="Zoe Turner",
                    room="101",
                    doc=date(1940, 5, 1),
                    current_location=lounge.id,
                ),
                Resident(
                    rfid="AA02",
                    name="Arthur Bell",
                    room="102",
                    current_location=lounge.id,
                ),
                Resident(
                    rfid="AA03",
                    name="Maya Ito",
                    room="201",
                    current_location=garden.id,
                ),
            ]
        )
        await session.flush()

        scans = [
            TimeStamp(
                rfid="AA01",
                location=lounge.id,
                timestamp=datetime(2024, 1, 31, 8, 0, tzinfo=timezone.utc),
            ),
            TimeStamp(
                rfid="AA02",
                location=lounge.id,
                timestamp=datetime(2024, 2, 1, 9, 0, tzinfo=timezone.utc),
            ),
            TimeStamp(
                rfid="AA01",
                location=lounge.id,
                timestamp=datetime(2024, 2, 3, 10, 0, tzinfo=timezone.utc),
            ),
            TimeStamp(
                rfid="AA02",
                location=lounge.id,
                timestamp=now - timedelta(days=3),
            ),
            TimeStamp(rfid="AA01", location=lounge.id, timestamp=now),
            TimeStamp(rfid="AA03", location=garden.id, timestamp=now),
        ]
        session.add_all(scans)
        await session.commit()

        return {
            "lounge": lounge.id,
            "garden": garden.id,
            "scans": [scan.id for scan in scans],
        }
