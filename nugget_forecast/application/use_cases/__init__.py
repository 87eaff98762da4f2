"""
Use Cases Package - Application Layer

Prediction use cases: validate raw input at the boundary, run the domain
predictor with the injected clock and return serializable results.
"""

from .prediction_use_cases import (
    PredictNextDiaperUseCase,
    PredictNextFeedingUseCase,
    PredictNextPumpingUseCase,
    PredictNextSleepUseCase,
)

__all__ = [
    "PredictNextDiaperUseCase",
    "PredictNextFeedingUseCase",
    "PredictNextPumpingUseCase",
    "PredictNextSleepUseCase",
]
