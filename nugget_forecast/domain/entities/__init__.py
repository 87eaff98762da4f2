"""
Domain Entities Package

This package contains the activity records consumed by the prediction
engine and the value objects it produces.
"""

from .activity import (
    DIAPER_TYPES,
    FEEDING_TYPES,
    ActivityDetails,
    ActivityRecord,
    ActivityType,
    BottleDetails,
    DiaperDetails,
    DiaperKind,
    FeedingSource,
    MedicineDetails,
    NursingDetails,
    NursingSide,
    PumpingDetails,
    SleepDetails,
    SleepType,
    SolidFoodItem,
    SolidsDetails,
    TemperatureDetails,
    is_skipped,
)
from .errors import ActivityValidationError, DomainError
from .policy import DEFAULT_POLICY, PredictionPolicy
from .prediction import (
    BlendComponent,
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
from .preferences import ActivityPreference, CustomPreferences

__all__ = [
    "ActivityDetails",
    "ActivityRecord",
    "ActivityType",
    "BottleDetails",
    "DiaperDetails",
    "DiaperKind",
    "DIAPER_TYPES",
    "FEEDING_TYPES",
    "FeedingSource",
    "MedicineDetails",
    "NursingDetails",
    "NursingSide",
    "PumpingDetails",
    "SleepDetails",
    "SleepType",
    "SolidFoodItem",
    "SolidsDetails",
    "TemperatureDetails",
    "is_skipped",
    "DomainError",
    "ActivityValidationError",
    "PredictionPolicy",
    "DEFAULT_POLICY",
    "BlendComponent",
    "BlendResult",
    "CalculationDetails",
    "ConfidenceLevel",
    "DiaperPrediction",
    "FeedingPrediction",
    "IntervalWeights",
    "PredictionKind",
    "PredictionResult",
    "PredictionStatus",
    "PumpingPrediction",
    "RecentPatternEntry",
    "ActivityPreference",
    "CustomPreferences",
]
