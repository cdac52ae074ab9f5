"""Date utilities."""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from whereabouts.core.config import SETTINGS


def get_timezone() -> tzinfo:
    """Return the zone configured for the facility.

    Returns:
        tzinfo: The configured timezone.
    """
    return ZoneInfo(SETTINGS.timezone)


def as_utc(value: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert a datetime to UTC, treating naive values as local to `tz`.

    Args:
        value (datetime): The datetime to convert.
        tz (tzinfo | None): Zone for naive values. Defaults to UTC.

    Returns:
        datetime: A timezone-aware UTC datetime.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz or timezone.utc)
    return value.astimezone(timezone.utc)


def today_bounds(tz: tzinfo) -> tuple[datetime, datetime]:
    """Compute the UTC bounds of the current day in `tz`.

    Args:
        tz (tzinfo): The zone whose calendar day is wanted.

    Returns:
        tuple[datetime, datetime]: Start (inclusive) and end (exclusive).
    """
    midnight: datetime = datetime.combine(
        datetime.now(tz).date(), time.min, tzinfo=tz
    )
    return as_utc(midnight), as_utc(midnight + timedelta(days=1))


def parse_range_bound(value: str, tz: tzinfo, end: bool = False) -> datetime:
    """Parse one end of a timestamp range.

    Accepts an ISO-8601 date (``2024-01-31``) or datetime
    (``2024-01-31T08:00:00``). A bare date used as the end of a range
    covers that whole day.

    Args:
        value (str): The raw bound taken from the request path.
        tz (tzinfo): Zone applied to naive values.
        end (bool): Whether the bound closes the range.

    Returns:
        datetime: The bound as a UTC datetime.

    Raises:
        ValueError: If the value is neither a date nor a datetime.
    """
    value = value.strip()
    try:
        day: date = date.fromisoformat(value)
    except ValueError:
        return as_utc(datetime.fromisoformat(value), tz)
    return as_utc(datetime.combine(day, time.max if end else time.min), tz)
