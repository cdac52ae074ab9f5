"""SQLAlchemy database models."""

import typing as t
from datetime import date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from whereabouts.core.database import Base


class Location(Base):  # pylint: disable=too-few-public-methods
    """A place in the facility where resident tags get scanned."""

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    # Relationships
    residents: Mapped[t.List["Resident"]] = relationship(
        "Resident", back_populates="location"
    )


class Resident(Base):  # pylint: disable=too-few-public-methods
    """Resident wearing an RFID tag."""

    __tablename__ = "residents"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    rfid: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    room: Mapped[str] = mapped_column(String(20), nullable=False)
    doc: Mapped[date | None] = mapped_column(Date, nullable=True)
    current_location: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("locations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    location: Mapped["Location | None"] = relationship(
        "Location", back_populates="residents"
    )


class TimeStamp(Base):  # pylint: disable=too-few-public-methods
    """A single tag scan: which resident was seen where, and when.

    Timestamps are stored in UTC.
    """

    __tablename__ = "timestamps"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    rfid: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("residents.rfid", ondelete="CASCADE"),
        nullable=False,
    )
    location: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False,
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),  # pylint: disable=not-callable
        nullable=False,
    )

    __table_args__ = (
        Index("ix_timestamps_location_timestamp", "location", "timestamp"),
    )
