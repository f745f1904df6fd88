"""Tests for step tables and threshold resolution."""

from datetime import timedelta

import pytest

from timeago import (
    DAY,
    DEFAULT_STEPS,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    YEAR,
    Step,
    Steps,
    Unit,
)

US = timedelta(microseconds=1)


@pytest.mark.parametrize(
    "boundary,below,above",
    [
        (MINUTE - SECOND / 2, (Unit.SECOND, 59), (Unit.MINUTE, 1)),
        (HOUR - MINUTE / 2, (Unit.MINUTE, 59), (Unit.HOUR, 1)),
        (DAY - HOUR / 2, (Unit.HOUR, 23), (Unit.DAY, 1)),
        (MONTH - DAY / 2, (Unit.DAY, 29), (Unit.MONTH, 1)),
        (345 * DAY, (Unit.MONTH, 11), (Unit.YEAR, 1)),
    ],
)
def test_default_steps_hand_over_at_boundary(boundary, below, above):
    """Each bucket hands over to the next exactly at its upper bound."""
    step, count = DEFAULT_STEPS.resolve(boundary - US)
    assert (step.unit, count) == below

    step, count = DEFAULT_STEPS.resolve(boundary)
    assert (step.unit, count) == above


@pytest.mark.parametrize(
    "midpoint,unit",
    [
        (1.5 * SECOND, Unit.SECOND),
        (1.5 * MINUTE, Unit.MINUTE),
        (1.5 * HOUR, Unit.HOUR),
        (1.5 * DAY, Unit.DAY),
        (1.5 * MONTH, Unit.MONTH),
        (1.5 * YEAR, Unit.YEAR),
    ],
)
def test_counts_round_half_up(midpoint, unit):
    """Counts round half up, so 1.5 units displays as 2."""
    step, count = DEFAULT_STEPS.resolve(midpoint - US)
    assert step.unit is unit
    assert count == 1

    step, count = DEFAULT_STEPS.resolve(midpoint)
    assert step.unit is unit
    assert count == 2


def test_resolve_ignores_sign():
    """Past and future durations resolve to the same bucket and count."""
    for delta in (SECOND, 90 * MINUTE, 36 * HOUR, 548 * DAY):
        assert DEFAULT_STEPS.resolve(-delta) == DEFAULT_STEPS.resolve(delta)


def test_last_step_is_unbounded():
    """Durations beyond every bound fall into the last step."""
    step, count = DEFAULT_STEPS.resolve(1000 * YEAR)
    assert step.unit is Unit.YEAR
    assert count == 1000


def test_smallest_is_first_divisor():
    assert DEFAULT_STEPS.smallest == SECOND


def test_steps_behave_as_sequence():
    """Step tables are ordered, indexable and sized."""
    assert len(DEFAULT_STEPS) == 6
    assert [step.unit for step in DEFAULT_STEPS] == list(Unit)
    assert DEFAULT_STEPS[-1].upper_bound is None


def test_steps_require_at_least_one_step():
    with pytest.raises(ValueError, match="at least one step"):
        Steps([])


def test_steps_require_unbounded_last_step():
    """A bounded last step leaves durations uncovered."""
    with pytest.raises(ValueError, match="last step must be unbounded"):
        Steps([Step(unit=Unit.SECOND, divisor=SECOND, upper_bound=MINUTE)])


def test_steps_reject_unbounded_middle_step():
    with pytest.raises(ValueError, match="Only the last step"):
        Steps(
            [
                Step(unit=Unit.SECOND, divisor=SECOND),
                Step(unit=Unit.MINUTE, divisor=MINUTE),
            ]
        )


def test_steps_must_ascend():
    with pytest.raises(ValueError, match="strictly ascending"):
        Steps(
            [
                Step(unit=Unit.SECOND, divisor=SECOND, upper_bound=HOUR),
                Step(unit=Unit.MINUTE, divisor=MINUTE, upper_bound=MINUTE),
                Step(unit=Unit.HOUR, divisor=HOUR),
            ]
        )


def test_step_rejects_non_positive_values():
    with pytest.raises(ValueError, match="divisor must be positive"):
        Step(unit=Unit.SECOND, divisor=timedelta(0))
    with pytest.raises(ValueError, match="upper bound must be positive"):
        Step(unit=Unit.SECOND, divisor=SECOND, upper_bound=-SECOND)


def test_custom_steps_without_hand_over():
    """A table may hand over at the unit size instead of the midpoint."""
    steps = Steps(
        [
            Step(unit=Unit.SECOND, divisor=SECOND, upper_bound=MINUTE),
            Step(unit=Unit.MINUTE, divisor=MINUTE),
        ]
    )
    assert steps.resolve(MINUTE - US) == (steps[0], 60)
    assert steps.resolve(MINUTE) == (steps[1], 1)
