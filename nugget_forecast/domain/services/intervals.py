"""
Domain Service - Interval Calculation

Turns a newest-first list of event times into inter-event gaps and blends
them with the age-based baseline into a predicted interval.

Confidence is a pure function of how many gaps are usable:

    ====================  ==========  =========  ==============  =============
    valid gaps            confidence  age-based  recent average  last interval
    ====================  ==========  =========  ==============  =============
    0                     low         1.0        0.0             0.0
    1-2                   medium      0.5        0.3             0.2
    3 or more             high        0.4        0.4             0.2
    ====================  ==========  =========  ==============  =============
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from statistics import fmean
from typing import List, Optional, Sequence

from nugget_forecast.domain.entities.prediction import ConfidenceLevel, IntervalWeights

MAX_VALID_GAP_HOURS = 12.0

TIER_WEIGHTS = {
    ConfidenceLevel.LOW: IntervalWeights(
        age_based=1.0, recent_average=0.0, last_interval=0.0
    ),
    ConfidenceLevel.MEDIUM: IntervalWeights(
        age_based=0.5, recent_average=0.3, last_interval=0.2
    ),
    ConfidenceLevel.HIGH: IntervalWeights(
        age_based=0.4, recent_average=0.4, last_interval=0.2
    ),
}


@dataclass(frozen=True, slots=True)
class IntervalSummary:
    intervals: List[Optional[float]]
    valid_intervals: List[float]
    average: Optional[float]
    last: Optional[float]
    confidence: ConfidenceLevel
    weights: IntervalWeights
    predicted_interval: float


def _whole_minutes(delta: timedelta) -> int:
    return math.trunc(delta.total_seconds() / 60)


def calculate_intervals(times: Sequence[datetime]) -> List[Optional[float]]:
    """
    Gaps in hours between consecutive entries of a newest-first list.

    Entry ``i`` is the gap between ``times[i - 1]`` and ``times[i]``, measured
    in whole minutes; the first entry is always None. Out-of-order or
    duplicate timestamps produce negative or zero gaps, which are kept.
    """
    intervals: List[Optional[float]] = []
    for index, current in enumerate(times):
        if index == 0:
            intervals.append(None)
            continue
        previous = times[index - 1]
        intervals.append(_whole_minutes(previous - current) / 60)
    return intervals


def is_valid_interval(
    gap: Optional[float], max_gap_hours: float = MAX_VALID_GAP_HOURS
) -> bool:
    return gap is not None and 0 < gap < max_gap_hours


def confidence_for(valid_count: int) -> ConfidenceLevel:
    if valid_count >= 3:
        return ConfidenceLevel.HIGH
    if valid_count >= 1:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def weights_for(level: ConfidenceLevel) -> IntervalWeights:
    return TIER_WEIGHTS[level]


def summarize_intervals(
    times: Sequence[datetime],
    age_based_interval: float,
    max_gap_hours: float = MAX_VALID_GAP_HOURS,
) -> IntervalSummary:
    """Compute gaps, confidence tier and the blended predicted interval."""
    intervals = calculate_intervals(times)
    valid = [gap for gap in intervals if is_valid_interval(gap, max_gap_hours)]

    average = fmean(valid) if valid else None
    last = valid[0] if valid else None
    confidence = confidence_for(len(valid))
    weights = weights_for(confidence)

    predicted = (
        age_based_interval * weights.age_based
        + (average if average is not None else age_based_interval)
        * weights.recent_average
        + (last if last is not None else age_based_interval) * weights.last_interval
    )

    return IntervalSummary(
        intervals=intervals,
        valid_intervals=valid,
        average=average,
        last=last,
        confidence=confidence,
        weights=weights,
        predicted_interval=predicted,
    )


def add_hours(start: datetime, hours: float) -> datetime:
    """Advance ``start`` by ``hours`` at whole-minute granularity."""
    minutes = math.trunc(round(hours * 60, 6))
    return start + timedelta(minutes=minutes)
