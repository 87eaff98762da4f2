"""
Domain Service - Nursing

Side inference and estimated intake for nursing sessions. Nursing has no
measured volume, so its suggested amount comes from an age-and-duration
estimate instead of the generic blend.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from nugget_forecast.domain.entities.activity import (
    ActivityRecord,
    ActivityType,
    NursingDetails,
    NursingSide,
)

# Age used for the estimate when the birth date is unknown.
DEFAULT_ESTIMATE_AGE_DAYS = 90

# Typical intake in ml over a 20-minute session, by max age in days.
_INTAKE_PER_SESSION = (
    (1, 7.5),
    (3, 15.0),
    (7, 45.0),
    (14, 60.0),
    (30, 90.0),
    (60, 105.0),
    (120, 120.0),
)
_INTAKE_OLDER = 135.0
_BASELINE_MINUTES = 20.0


@dataclass(frozen=True, slots=True)
class NursingVolume:
    left_ml: float
    right_ml: float
    total_ml: float


def infer_nursing_side(
    left_minutes: Optional[float], right_minutes: Optional[float]
) -> NursingSide:
    """
    Infer the side from per-side durations.

    Exactly one non-zero side wins; anything else (both zero, both non-zero,
    both missing) is reported as ``both``.
    """
    left = bool(left_minutes and left_minutes > 0)
    right = bool(right_minutes and right_minutes > 0)
    if left and not right:
        return NursingSide.LEFT
    if right and not left:
        return NursingSide.RIGHT
    return NursingSide.BOTH


def nursing_side_of(record: ActivityRecord) -> Optional[NursingSide]:
    """Side used by a nursing record, or None for other activity types."""
    if record.type != ActivityType.NURSING:
        return None
    details = record.details
    if not isinstance(details, NursingDetails):
        return NursingSide.BOTH
    if (
        details.left_duration_minutes is not None
        or details.right_duration_minutes is not None
    ):
        return infer_nursing_side(
            details.left_duration_minutes, details.right_duration_minutes
        )
    return details.side


def next_nursing_side(last_side: Optional[NursingSide]) -> NursingSide:
    """Alternate breasts between sessions, starting on the left."""
    if last_side == NursingSide.LEFT:
        return NursingSide.RIGHT
    if last_side == NursingSide.RIGHT:
        return NursingSide.LEFT
    if last_side == NursingSide.BOTH:
        return NursingSide.BOTH
    return NursingSide.LEFT


def _round_half_ml(value: float) -> float:
    return math.floor(value * 2 + 0.5) / 2


def estimate_nursing_volume(
    baby_age_days: Optional[int],
    duration_minutes: float,
    side: NursingSide = NursingSide.BOTH,
) -> NursingVolume:
    """Estimated intake for a nursing session of the given length."""
    age_days = (
        baby_age_days if baby_age_days is not None else DEFAULT_ESTIMATE_AGE_DAYS
    )
    per_session = _INTAKE_OLDER
    for max_age, intake in _INTAKE_PER_SESSION:
        if age_days <= max_age:
            per_session = intake
            break

    total = _round_half_ml(per_session * max(duration_minutes, 0) / _BASELINE_MINUTES)
    if side == NursingSide.LEFT:
        return NursingVolume(left_ml=total, right_ml=0.0, total_ml=total)
    if side == NursingSide.RIGHT:
        return NursingVolume(left_ml=0.0, right_ml=total, total_ml=total)
    half = _round_half_ml(total / 2)
    return NursingVolume(left_ml=half, right_ml=half, total_ml=total)
