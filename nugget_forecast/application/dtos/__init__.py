"""
DTOs Package - Application Layer

Pydantic models used at the boundary of the prediction engine: raw activity
history and preferences come in, serializable predictions go out.
"""

from .activity_dto import (
    ActivityDetailsDTO,
    ActivityRecordDTO,
    BottleDetailsDTO,
    CamelModel,
    DiaperDetailsDTO,
    MedicineDetailsDTO,
    NursingDetailsDTO,
    PumpingDetailsDTO,
    SleepDetailsDTO,
    SolidFoodItemDTO,
    SolidsDetailsDTO,
    TemperatureDetailsDTO,
)
from .prediction_dto import (
    BlendComponentDTO,
    BlendResultDTO,
    CalculationDetailsDTO,
    IntervalWeightsDTO,
    PredictionResponseDTO,
    RecentPatternEntryDTO,
)
from .preferences_dto import ActivityPreferenceDTO, CustomPreferencesDTO

__all__ = [
    "CamelModel",
    "ActivityDetailsDTO",
    "ActivityRecordDTO",
    "BottleDetailsDTO",
    "DiaperDetailsDTO",
    "MedicineDetailsDTO",
    "NursingDetailsDTO",
    "PumpingDetailsDTO",
    "SleepDetailsDTO",
    "SolidFoodItemDTO",
    "SolidsDetailsDTO",
    "TemperatureDetailsDTO",
    "ActivityPreferenceDTO",
    "CustomPreferencesDTO",
    "BlendComponentDTO",
    "BlendResultDTO",
    "CalculationDetailsDTO",
    "IntervalWeightsDTO",
    "PredictionResponseDTO",
    "RecentPatternEntryDTO",
]
