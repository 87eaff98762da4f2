"""
Domain Service - Pumping Volumes

Expected pumping output by lactation stage:
  * early colostrum (days 0-3): very small volumes
  * transitional milk (days 4-14): quickly increasing volumes
  * mature milk (2+ weeks): higher, steadier volumes
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from nugget_forecast.domain.entities.activity import ActivityRecord, PumpingDetails

COLOSTRUM_PHASE_MAX_DAYS = 5
BASELINE_SESSION_MINUTES = 20.0

# Total ml for a 20-minute session, by max age in days.
_BASE_VOLUMES = (
    (1, 7.5),
    (3, 15.0),
    (7, 75.0),
    (14, 150.0),
    (28, 180.0),
)
ESTABLISHED_VOLUME_ML = 180.0


@dataclass(frozen=True, slots=True)
class PumpingVolume:
    left_ml: float
    right_ml: float
    total_ml: float
    is_colostrum: bool


def is_colostrum_phase(baby_age_days: int) -> bool:
    return baby_age_days <= COLOSTRUM_PHASE_MAX_DAYS


def _base_volume(baby_age_days: int, ml_per_pump: Optional[float]) -> float:
    for max_age, volume in _BASE_VOLUMES:
        if baby_age_days <= max_age:
            return volume
    return ml_per_pump if ml_per_pump is not None else ESTABLISHED_VOLUME_ML


def _round_half_ml(value: float) -> float:
    return math.floor(value * 2 + 0.5) / 2


def calculate_pumping_volumes(
    baby_age_days: int,
    duration_minutes: float,
    ml_per_pump: Optional[float] = None,
) -> PumpingVolume:
    """
    Expected volumes for a session, split evenly between breasts.

    Args:
        baby_age_days: Baby's age in days since birth.
        duration_minutes: Session length; 20 minutes is the baseline.
        ml_per_pump: Configured per-session volume used once supply is
            established (after four weeks).
    """
    base = _base_volume(baby_age_days, ml_per_pump)
    total = _round_half_ml(base * duration_minutes / BASELINE_SESSION_MINUTES)
    half = _round_half_ml(total / 2)
    return PumpingVolume(
        left_ml=half,
        right_ml=half,
        total_ml=total,
        is_colostrum=is_colostrum_phase(baby_age_days),
    )


def pumped_amount_ml(record: ActivityRecord) -> Optional[float]:
    """Recorded output of a pumping session, falling back to per-breast amounts."""
    if record.amount_ml:
        return record.amount_ml
    details = record.details
    if isinstance(details, PumpingDetails):
        total = (details.left_breast_ml or 0) + (details.right_breast_ml or 0)
        return total if total > 0 else None
    return None
