"""Nanosecond timestamp helpers."""

import time
from datetime import UTC, datetime, timedelta

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def now_unix_nano() -> int:
    """Return the current wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()


def to_unix_nano(value: datetime | int | None) -> int:
    """Convert a datetime or integer nanoseconds to nanoseconds since epoch.

    Naive datetimes are treated as UTC. ``None`` means "now", captured at
    the moment of the call. Integer arithmetic is used so no precision is
    lost to floats.
    """
    if value is None:
        return now_unix_nano()
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return ((value - _EPOCH) // timedelta(microseconds=1)) * 1000
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Timestamp must be a datetime or integer nanoseconds, got {value!r}"
        )
    return value
