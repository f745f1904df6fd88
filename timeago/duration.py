"""Signed elapsed time between an event and a reference instant."""

from datetime import datetime, timedelta, timezone

TimePoint = datetime | int | float


def to_datetime(point: TimePoint, name: str = "time") -> datetime:
    """Convert a time point to a datetime.

    Accepts:
    - datetime: Passed through as-is (naive or aware)
    - int/float: Unix timestamp, converted to a UTC-aware datetime

    Raises:
        TypeError: If point is an unsupported type
    """
    if isinstance(point, datetime):
        return point
    if isinstance(point, (int, float)) and not isinstance(point, bool):
        return datetime.fromtimestamp(point, tz=timezone.utc)
    raise TypeError(
        f"{name} must be a datetime or a Unix timestamp.\n"
        f"Got {type(point).__name__!r}: {point!r}\n"
        f"Examples:\n"
        f"  datetime(2013, 8, 30, 12, tzinfo=timezone.utc)\n"
        f"  1377864000  # int (Unix seconds)"
    )


def elapsed(t: TimePoint, ref: TimePoint) -> timedelta:
    """Return ``t - ref``.

    Negative when the event happened before the reference (past), positive
    when it lies after it (future).
    """
    event = to_datetime(t, "t")
    reference = to_datetime(ref, "ref")
    if (event.tzinfo is None) != (reference.tzinfo is None):
        naive, value = ("t", event) if event.tzinfo is None else ("ref", reference)
        raise TypeError(
            f"Cannot compare a naive and a timezone-aware datetime.\n"
            f"Got naive {naive}: {value!r}\n"
            f"Hint: Add timezone info to both:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)\n"
            f"  # Or use Unix timestamps for both"
        )
    return event - reference
