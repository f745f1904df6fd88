"""Duration constants for timeago.

Constants are `timedelta` values. Where a duration is accepted as a plain
number, it is a number of seconds and `to_timedelta` converts it.

Day, month and year are fixed-length approximations used only for threshold
arithmetic. They are not calendar-accurate.
"""

from datetime import timedelta

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
MONTH = 30 * DAY
YEAR = 365 * DAY


def to_timedelta(value: timedelta | int | float, name: str = "duration") -> timedelta:
    """Coerce a duration given as a timedelta or a number of seconds."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(seconds=value)
    raise TypeError(
        f"{name} must be a timedelta or a number of seconds.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  timedelta(minutes=90)\n"
        f"  5400  # seconds\n"
        f"  90 * MINUTE"
    )
