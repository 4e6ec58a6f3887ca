"""Timestamps are stored as naive UTC datetimes throughout the domain."""

from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def as_naive(value: datetime | None) -> datetime | None:
    """Normalize an incoming datetime for storage; aware values are converted to UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
