"""Tunable parameters of the prediction services."""

from __future__ import annotations

from dataclasses import dataclass

from .prediction import PredictionKind


@dataclass(frozen=True, slots=True)
class PredictionPolicy:
    """
    Knobs shared by all predictors.

    Attributes:
        history_limit: Most recent same-kind records considered.
        recent_pattern_limit: Records echoed back in ``recent_pattern``.
        max_valid_gap_hours: Gaps at or above this are excluded from averages.
        recovery_interval_factor: Fraction of the interval suggested as a
            catch-up delay once a prediction is overdue.
        *_preference_weight: Default custom-preference weight per kind.
    """

    history_limit: int = 10
    recent_pattern_limit: int = 5
    max_valid_gap_hours: float = 12.0
    recovery_interval_factor: float = 0.6
    feeding_preference_weight: float = 0.4
    pumping_preference_weight: float = 0.4
    sleep_preference_weight: float = 0.4

    def preference_weight_for(self, kind: PredictionKind) -> float:
        if kind == PredictionKind.FEEDING:
            return self.feeding_preference_weight
        if kind == PredictionKind.PUMPING:
            return self.pumping_preference_weight
        if kind == PredictionKind.SLEEP:
            return self.sleep_preference_weight
        return 0.0


DEFAULT_POLICY = PredictionPolicy()
