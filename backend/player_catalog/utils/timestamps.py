"""Conversions between epoch milliseconds and datetimes."""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_epoch_millis(value: datetime) -> int:
    """Return milliseconds since the Unix epoch, truncated toward negative infinity."""
    return (ensure_utc(value) - EPOCH) // _ONE_MS


def from_epoch_millis(millis: int) -> datetime:
    """Return the UTC datetime for ``millis`` since the Unix epoch."""
    return EPOCH + timedelta(milliseconds=millis)
