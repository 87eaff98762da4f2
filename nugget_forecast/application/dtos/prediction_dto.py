"""
Prediction DTOs - Application Layer

Serializable view of a ``PredictionResult``. Every top-level field is always
present; missing values are an explicit ``None``. Dump with
``by_alias=True`` for camelCase keys.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from nugget_forecast.domain.entities.activity import NursingSide
from nugget_forecast.domain.entities.prediction import (
    BlendResult,
    CalculationDetails,
    ConfidenceLevel,
    DiaperPrediction,
    FeedingPrediction,
    IntervalWeights,
    PredictionKind,
    PredictionResult,
    PredictionStatus,
    PumpingPrediction,
    RecentPatternEntry,
)
from nugget_forecast.domain.services.blending import describe_blend

from .activity_dto import CamelModel


class IntervalWeightsDTO(CamelModel):
    age_based: float
    recent_average: float
    last_interval: float

    @classmethod
    def from_domain(cls, weights: IntervalWeights) -> "IntervalWeightsDTO":
        return cls(
            age_based=weights.age_based,
            recent_average=weights.recent_average,
            last_interval=weights.last_interval,
        )


class BlendComponentDTO(CamelModel):
    name: str
    value: float
    weight: float


class BlendResultDTO(CamelModel):
    value: Optional[float] = Field(description="Raw weighted value")
    source: str = Field(description="Contributing sources and their weights")
    description: str = Field(description="Display sentence for the source")
    components: List[BlendComponentDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: BlendResult) -> "BlendResultDTO":
        return cls(
            value=result.value,
            source=result.source,
            description=describe_blend(result),
            components=[
                BlendComponentDTO(
                    name=component.name,
                    value=component.value,
                    weight=component.weight,
                )
                for component in result.components
            ],
        )


class CalculationDetailsDTO(CamelModel):
    age_based_interval: float
    recent_average_interval: Optional[float]
    last_interval: Optional[float]
    weights: IntervalWeightsDTO
    data_points: int
    valid_interval_count: int

    @classmethod
    def from_domain(cls, details: CalculationDetails) -> "CalculationDetailsDTO":
        return cls(
            age_based_interval=details.age_based_interval,
            recent_average_interval=details.recent_average_interval,
            last_interval=details.last_interval,
            weights=IntervalWeightsDTO.from_domain(details.weights),
            data_points=details.data_points,
            valid_interval_count=details.valid_interval_count,
        )


class RecentPatternEntryDTO(CamelModel):
    time: datetime
    interval_from_previous: Optional[float]
    amount_ml: Optional[float]
    duration_minutes: Optional[float]
    notes: Optional[str]
    type: Optional[str]

    @classmethod
    def from_domain(cls, entry: RecentPatternEntry) -> "RecentPatternEntryDTO":
        return cls(
            time=entry.time,
            interval_from_previous=entry.interval_from_previous,
            amount_ml=entry.amount_ml,
            duration_minutes=entry.duration_minutes,
            notes=entry.notes,
            type=entry.type,
        )


class PredictionResponseDTO(CamelModel):
    """Prediction for one activity kind as returned to callers."""

    kind: PredictionKind
    next_event_time: datetime
    status: Optional[PredictionStatus] = Field(
        description="Upcoming/soon/overdue relative to the time of the call"
    )
    confidence_level: ConfidenceLevel
    interval_hours: float
    average_interval_hours: Optional[float]
    last_event_time: Optional[datetime]
    last_event_amount: Optional[float]
    last_event_duration: Optional[float]
    recent_pattern: List[RecentPatternEntryDTO]
    suggested_volume: Optional[float]
    suggested_volume_blend: Optional[BlendResultDTO]
    suggested_duration: Optional[float]
    suggested_duration_blend: Optional[BlendResultDTO]
    calculation_details: CalculationDetailsDTO
    is_overdue: bool
    overdue_minutes: Optional[int]
    suggested_recovery_time: Optional[datetime]
    recent_skip_time: Optional[datetime]

    # Feeding and diaper
    suggested_type: Optional[str] = None
    last_nursing_side: Optional[NursingSide] = None
    suggested_nursing_side: Optional[NursingSide] = None

    # Diaper only
    last_diaper_type: Optional[str] = None

    # Pumping only
    is_colostrum: Optional[bool] = None

    @classmethod
    def from_domain(
        cls,
        result: PredictionResult,
        status: Optional[PredictionStatus] = None,
    ) -> "PredictionResponseDTO":
        extras: Dict[str, Any] = {}
        if isinstance(result, FeedingPrediction):
            extras = {
                "suggested_type": result.suggested_type,
                "last_nursing_side": result.last_nursing_side,
                "suggested_nursing_side": result.suggested_nursing_side,
            }
        elif isinstance(result, PumpingPrediction):
            extras = {"is_colostrum": result.is_colostrum}
        elif isinstance(result, DiaperPrediction):
            extras = {
                "suggested_type": result.suggested_type,
                "last_diaper_type": result.last_diaper_type,
            }

        return cls(
            kind=result.kind,
            next_event_time=result.next_event_time,
            status=status,
            confidence_level=result.confidence_level,
            interval_hours=result.interval_hours,
            average_interval_hours=result.average_interval_hours,
            last_event_time=result.last_event_time,
            last_event_amount=result.last_event_amount,
            last_event_duration=result.last_event_duration,
            recent_pattern=[
                RecentPatternEntryDTO.from_domain(entry)
                for entry in result.recent_pattern
            ],
            suggested_volume=result.suggested_volume,
            suggested_volume_blend=(
                BlendResultDTO.from_domain(result.suggested_volume_blend)
                if result.suggested_volume_blend
                else None
            ),
            suggested_duration=result.suggested_duration,
            suggested_duration_blend=(
                BlendResultDTO.from_domain(result.suggested_duration_blend)
                if result.suggested_duration_blend
                else None
            ),
            calculation_details=CalculationDetailsDTO.from_domain(
                result.calculation_details
            ),
            is_overdue=result.is_overdue,
            overdue_minutes=result.overdue_minutes,
            suggested_recovery_time=result.suggested_recovery_time,
            recent_skip_time=result.recent_skip_time,
            **extras,
        )
