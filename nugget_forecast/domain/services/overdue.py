"""
Domain Service - Overdue Thresholds

Minutes past the predicted time after which a prediction counts as overdue.
Thresholds loosen as the baby grows; an unknown age uses newborn thresholds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from nugget_forecast.domain.entities.prediction import PredictionKind, PredictionStatus

_AGE_STEPS = (7, 14, 30, 60, 90)

_THRESHOLDS = {
    PredictionKind.FEEDING: (15, 20, 25, 30, 35, 45),
    PredictionKind.SLEEP: (20, 25, 30, 40, 50, 60),
    PredictionKind.DIAPER: (30, 40, 50, 60, 75, 90),
    PredictionKind.PUMPING: (20, 25, 30, 40, 45, 60),
}

SOON_WINDOW_MINUTES = 30


@dataclass(frozen=True, slots=True)
class OverdueState:
    is_overdue: bool
    overdue_minutes: Optional[int]
    suggested_recovery_time: Optional[datetime]


def overdue_threshold(kind: PredictionKind, baby_age_days: Optional[int]) -> int:
    age_days = baby_age_days if baby_age_days is not None else 0
    thresholds = _THRESHOLDS[kind]
    for index, max_age in enumerate(_AGE_STEPS):
        if age_days <= max_age:
            return thresholds[index]
    return thresholds[-1]


def threshold_description(kind: PredictionKind, baby_age_days: Optional[int]) -> str:
    """Explain the overdue threshold for tooltips and help text."""
    threshold = overdue_threshold(kind, baby_age_days)
    age_days = baby_age_days if baby_age_days is not None else 0

    if age_days <= 7:
        context = "newborns need frequent care"
    elif age_days <= 30:
        context = "young babies need regular care"
    elif age_days <= 90:
        context = "babies this age are developing patterns"
    else:
        context = "babies this age have more flexible schedules"

    return f"Marked overdue after {threshold} minutes because {context}"


def _minutes_between(start: datetime, end: datetime) -> int:
    return math.trunc((end - start).total_seconds() / 60)


def prediction_status(
    next_event_time: datetime,
    baby_age_days: Optional[int],
    kind: PredictionKind,
    now: datetime,
) -> PredictionStatus:
    minutes_until = _minutes_between(now, next_event_time)
    threshold = overdue_threshold(kind, baby_age_days)

    if minutes_until < -threshold:
        return PredictionStatus.OVERDUE
    if minutes_until <= min(SOON_WINDOW_MINUTES, threshold / 2):
        return PredictionStatus.SOON
    return PredictionStatus.UPCOMING


def is_overdue(
    next_event_time: datetime,
    baby_age_days: Optional[int],
    kind: PredictionKind,
    now: datetime,
) -> bool:
    return _minutes_between(next_event_time, now) > overdue_threshold(
        kind, baby_age_days
    )


def overdue_state(
    next_event_time: datetime,
    interval_hours: float,
    baby_age_days: Optional[int],
    kind: PredictionKind,
    now: datetime,
    recovery_factor: float,
) -> OverdueState:
    """
    Overdue flag, minutes overdue and a suggested catch-up time.

    The catch-up time is ``now`` plus ``recovery_factor`` of the interval.
    """
    minutes_until = _minutes_between(now, next_event_time)
    if minutes_until >= -overdue_threshold(kind, baby_age_days):
        return OverdueState(False, None, None)

    recovery_minutes = math.trunc(round(interval_hours * recovery_factor * 60, 6))
    return OverdueState(
        is_overdue=True,
        overdue_minutes=abs(minutes_until),
        suggested_recovery_time=now + timedelta(minutes=recovery_minutes),
    )
