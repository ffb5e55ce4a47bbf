import datetime
from typing import Optional
from uuid import UUID


def parse_id(value: Optional[str]) -> Optional[UUID]:
    """Parses a record id from a path or body; malformed ids count as unknown."""
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(dt: datetime.datetime) -> datetime.datetime:
    # SQLite hands back naive datetimes; everything is stored as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def start_of_today(now: Optional[datetime.datetime] = None) -> datetime.datetime:
    now = as_utc(now or utcnow())
    return now.replace(hour=0, minute=0, second=0, microsecond=0)
