"""
Domain Service - Age Tables

Age-bucketed defaults used as the baseline of every prediction. Each lookup
is a step function over "age in days" thresholds: all ages inside a bucket
share one value and nothing is interpolated across bucket boundaries.

A missing age (unknown birth date) always maps to the "established" tier
listed next to each table rather than to any particular bucket.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, TypeVar

from nugget_forecast.domain.entities.prediction import PredictionKind

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AmountRange:
    """Typical per-session volume in milliliters."""

    low: float
    medium: float
    high: float


def _step(
    age_days: Optional[int],
    buckets: Sequence[Tuple[int, T]],
    older: T,
    established: T,
) -> T:
    if age_days is None:
        return established
    for max_age, value in buckets:
        if age_days <= max_age:
            return value
    return older


# Hours between the starts of consecutive feedings.
_FEEDING_INTERVALS = (
    (2, 2.0),
    (14, 2.5),
    (60, 3.0),
    (90, 3.5),
)
FEEDING_INTERVAL_OLDER = 4.0
FEEDING_INTERVAL_ESTABLISHED = 3.0

# Hours between pumping sessions.
_PUMPING_INTERVALS = (
    (7, 2.5),
    (30, 3.0),
    (90, 3.5),
    (180, 4.0),
)
PUMPING_INTERVAL_OLDER = 5.0
PUMPING_INTERVAL_ESTABLISHED = 3.0

# Hours between the starts of consecutive sleeps (wake window plus nap).
_SLEEP_INTERVALS = (
    (7, 1.5),
    (30, 2.0),
    (90, 2.5),
    (180, 3.0),
    (365, 3.5),
)
SLEEP_INTERVAL_OLDER = 4.5
SLEEP_INTERVAL_ESTABLISHED = 3.0

# Hours between diaper changes.
_DIAPER_INTERVALS = (
    (7, 2.0),
    (30, 2.5),
    (90, 3.0),
)
DIAPER_INTERVAL_OLDER = 3.5
DIAPER_INTERVAL_ESTABLISHED = 3.0

_FEEDING_AMOUNTS = (
    (2, AmountRange(30, 45, 60)),
    (7, AmountRange(45, 60, 90)),
    (14, AmountRange(60, 90, 105)),
    (30, AmountRange(75, 105, 135)),
    (60, AmountRange(90, 135, 165)),
    (120, AmountRange(120, 165, 210)),
    (180, AmountRange(150, 195, 240)),
)
FEEDING_AMOUNT_OLDER = AmountRange(180, 225, 270)
FEEDING_AMOUNT_ESTABLISHED = AmountRange(60, 120, 180)

_PUMPING_AMOUNTS = (
    (1, AmountRange(5, 7.5, 10)),
    (3, AmountRange(10, 15, 20)),
    (7, AmountRange(60, 75, 90)),
    (14, AmountRange(120, 150, 180)),
    (28, AmountRange(150, 180, 210)),
)
PUMPING_AMOUNT_OLDER = AmountRange(120, 180, 240)
PUMPING_AMOUNT_ESTABLISHED = AmountRange(120, 180, 240)

# Minutes per nursing session.
_FEEDING_DURATIONS = (
    (7, 30.0),
    (30, 25.0),
    (90, 20.0),
)
FEEDING_DURATION_OLDER = 15.0
FEEDING_DURATION_ESTABLISHED = 20.0

# Minutes per pumping session.
_PUMPING_DURATIONS = ((14, 15.0),)
PUMPING_DURATION_OLDER = 20.0
PUMPING_DURATION_ESTABLISHED = 20.0

# Minutes per sleep.
_SLEEP_DURATIONS = (
    (90, 45.0),
    (180, 75.0),
    (365, 90.0),
)
SLEEP_DURATION_OLDER = 105.0
SLEEP_DURATION_ESTABLISHED = 60.0


def feeding_interval_hours(age_days: Optional[int]) -> float:
    return _step(
        age_days,
        _FEEDING_INTERVALS,
        FEEDING_INTERVAL_OLDER,
        FEEDING_INTERVAL_ESTABLISHED,
    )


def pumping_interval_hours(age_days: Optional[int]) -> float:
    return _step(
        age_days,
        _PUMPING_INTERVALS,
        PUMPING_INTERVAL_OLDER,
        PUMPING_INTERVAL_ESTABLISHED,
    )


def sleep_interval_hours(age_days: Optional[int]) -> float:
    return _step(
        age_days,
        _SLEEP_INTERVALS,
        SLEEP_INTERVAL_OLDER,
        SLEEP_INTERVAL_ESTABLISHED,
    )


def diaper_interval_hours(age_days: Optional[int]) -> float:
    return _step(
        age_days,
        _DIAPER_INTERVALS,
        DIAPER_INTERVAL_OLDER,
        DIAPER_INTERVAL_ESTABLISHED,
    )


def interval_hours_for(kind: PredictionKind, age_days: Optional[int]) -> float:
    """Age-based interval for any predicted activity kind."""
    if kind == PredictionKind.FEEDING:
        return feeding_interval_hours(age_days)
    if kind == PredictionKind.PUMPING:
        return pumping_interval_hours(age_days)
    if kind == PredictionKind.SLEEP:
        return sleep_interval_hours(age_days)
    return diaper_interval_hours(age_days)


def feeding_amount_range(age_days: Optional[int]) -> AmountRange:
    return _step(
        age_days, _FEEDING_AMOUNTS, FEEDING_AMOUNT_OLDER, FEEDING_AMOUNT_ESTABLISHED
    )


def pumping_amount_range(age_days: Optional[int]) -> AmountRange:
    return _step(
        age_days, _PUMPING_AMOUNTS, PUMPING_AMOUNT_OLDER, PUMPING_AMOUNT_ESTABLISHED
    )


def typical_feeding_duration(age_days: Optional[int]) -> float:
    return _step(
        age_days,
        _FEEDING_DURATIONS,
        FEEDING_DURATION_OLDER,
        FEEDING_DURATION_ESTABLISHED,
    )


def typical_pumping_duration(age_days: Optional[int]) -> float:
    return _step(
        age_days,
        _PUMPING_DURATIONS,
        PUMPING_DURATION_OLDER,
        PUMPING_DURATION_ESTABLISHED,
    )


def typical_sleep_duration(age_days: Optional[int]) -> float:
    return _step(
        age_days,
        _SLEEP_DURATIONS,
        SLEEP_DURATION_OLDER,
        SLEEP_DURATION_ESTABLISHED,
    )
