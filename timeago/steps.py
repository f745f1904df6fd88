"""Magnitude buckets and threshold resolution.

A step table is an ordered sequence of buckets. Each bucket covers the
durations below its upper bound (and at or above the previous bucket's) and
divides them by its unit length to produce the displayed count.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import overload

from timeago.util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR


class Unit(Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True, kw_only=True)
class Step:
    unit: Unit
    divisor: timedelta
    upper_bound: timedelta | None = None

    def __post_init__(self) -> None:
        if self.divisor <= timedelta(0):
            raise ValueError(f"Step divisor must be positive, got {self.divisor}")
        if self.upper_bound is not None and self.upper_bound <= timedelta(0):
            raise ValueError(
                f"Step upper bound must be positive, got {self.upper_bound}"
            )

    def covers(self, duration: timedelta) -> bool:
        return self.upper_bound is None or duration < self.upper_bound

    def count(self, duration: timedelta) -> int:
        """Round ``duration / divisor`` half up, in exact microseconds."""
        micros = _micros(duration)
        divisor = _micros(self.divisor)
        return (2 * micros + divisor) // (2 * divisor)


def _micros(d: timedelta) -> int:
    return (d.days * 86400 + d.seconds) * 1_000_000 + d.microseconds


class Steps(Sequence[Step]):
    """Validated, immutable step table.

    Steps must be strictly ascending by upper bound and only the last one may
    be unbounded, so the table partitions ``[0, ∞)``.
    """

    def __init__(self, steps: Iterable[Step]):
        self._steps: tuple[Step, ...] = tuple(steps)
        if not self._steps:
            raise ValueError("A step table needs at least one step")
        *bounded, last = self._steps
        if last.upper_bound is not None:
            raise ValueError(
                f"The last step must be unbounded (upper_bound=None).\n"
                f"Got {last.unit.value!r} bounded at {last.upper_bound}"
            )
        previous: timedelta | None = None
        for step in bounded:
            if step.upper_bound is None:
                raise ValueError(
                    f"Only the last step may be unbounded, "
                    f"but {step.unit.value!r} has no upper bound"
                )
            if previous is not None and step.upper_bound <= previous:
                raise ValueError(
                    f"Steps must be strictly ascending by upper bound: "
                    f"{step.unit.value!r} ends at {step.upper_bound}, "
                    f"not after {previous}"
                )
            previous = step.upper_bound

    @property
    def smallest(self) -> timedelta:
        """Durations shorter than this render as the zero phrase."""
        return self._steps[0].divisor

    def resolve(self, duration: timedelta) -> tuple[Step, int]:
        """Return the bucket covering ``|duration|`` and its rounded count."""
        duration = abs(duration)
        for step in self._steps:
            if step.covers(duration):
                return step, step.count(duration)
        raise AssertionError("unreachable: the last step is unbounded")

    @overload
    def __getitem__(self, index: int) -> Step: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Step]: ...

    def __getitem__(self, index: int | slice) -> Step | Sequence[Step]:
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"Steps({list(self._steps)!r})"


# Each bucket hands over to the next where its rounded count would reach one
# unit of the next bucket (e.g. 59.5 seconds rounds to 60 seconds).
DEFAULT_STEPS = Steps(
    [
        Step(unit=Unit.SECOND, divisor=SECOND, upper_bound=MINUTE - SECOND / 2),
        Step(unit=Unit.MINUTE, divisor=MINUTE, upper_bound=HOUR - MINUTE / 2),
        Step(unit=Unit.HOUR, divisor=HOUR, upper_bound=DAY - HOUR / 2),
        Step(unit=Unit.DAY, divisor=DAY, upper_bound=MONTH - DAY / 2),
        Step(unit=Unit.MONTH, divisor=MONTH, upper_bound=12 * MONTH - MONTH / 2),
        Step(unit=Unit.YEAR, divisor=YEAR),
    ]
)
