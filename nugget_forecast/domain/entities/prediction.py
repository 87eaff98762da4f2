"""
Domain Entities - Prediction

Value objects produced by the prediction services. Every prediction call
constructs a fresh result; nothing here is mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from .activity import NursingSide


class PredictionKind(str, Enum):
    """Activity kind a prediction is made for."""

    FEEDING = "feeding"
    PUMPING = "pumping"
    SLEEP = "sleep"
    DIAPER = "diaper"


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PredictionStatus(str, Enum):
    UPCOMING = "upcoming"
    SOON = "soon"
    OVERDUE = "overdue"


@dataclass(frozen=True, slots=True)
class IntervalWeights:
    """Weights of the three interval sources; always sum to 1.0."""

    age_based: float
    recent_average: float
    last_interval: float

    def total(self) -> float:
        return self.age_based + self.recent_average + self.last_interval


@dataclass(frozen=True, slots=True)
class BlendComponent:
    """One available source that took part in a blend."""

    name: str
    value: float
    weight: float


@dataclass(frozen=True, slots=True)
class BlendResult:
    """
    Weighted combination of custom, recent and age-based values.

    ``value`` is the raw weighted float (rounding is left to the caller) and
    ``source`` is a reproducible description of the contributing inputs.
    """

    value: Optional[float]
    source: str
    components: Tuple[BlendComponent, ...] = ()


@dataclass(frozen=True, slots=True)
class RecentPatternEntry:
    time: datetime
    interval_from_previous: Optional[float]
    amount_ml: Optional[float] = None
    duration_minutes: Optional[float] = None
    notes: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CalculationDetails:
    """Raw inputs used to compute the predicted interval."""

    age_based_interval: float
    recent_average_interval: Optional[float]
    last_interval: Optional[float]
    weights: IntervalWeights
    data_points: int
    valid_interval_count: int


@dataclass(frozen=True, slots=True)
class PredictionResult:
    """Next expected event for one activity kind."""

    kind: PredictionKind
    next_event_time: datetime
    confidence_level: ConfidenceLevel
    interval_hours: float
    average_interval_hours: Optional[float]
    last_event_time: Optional[datetime]
    last_event_amount: Optional[float]
    last_event_duration: Optional[float]
    recent_pattern: Tuple[RecentPatternEntry, ...]
    suggested_volume: Optional[float]
    suggested_volume_blend: Optional[BlendResult]
    suggested_duration: Optional[float]
    suggested_duration_blend: Optional[BlendResult]
    calculation_details: CalculationDetails
    is_overdue: bool = False
    overdue_minutes: Optional[int] = None
    suggested_recovery_time: Optional[datetime] = None
    recent_skip_time: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class FeedingPrediction(PredictionResult):
    suggested_type: Optional[str] = None
    last_nursing_side: Optional[NursingSide] = None
    suggested_nursing_side: Optional[NursingSide] = None


@dataclass(frozen=True, slots=True)
class PumpingPrediction(PredictionResult):
    is_colostrum: bool = False


@dataclass(frozen=True, slots=True)
class DiaperPrediction(PredictionResult):
    last_diaper_type: Optional[str] = None
    suggested_type: Optional[str] = None
