"""UTC helpers shared by models, events and error bodies."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime read back from the store.

    SQLite drops timezone information, so stored timestamps come back naive
    even though they were written in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def isoformat_utc(value: datetime | None = None) -> str:
    """Render ``value`` (default: now) as an ISO-8601 UTC string."""
    return as_utc(value if value is not None else utcnow()).isoformat()
