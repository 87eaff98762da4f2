"""Domain entities for per-baby custom prediction preferences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .prediction import PredictionKind


@dataclass(frozen=True, slots=True)
class ActivityPreference:
    """User-entered override values for one activity kind."""

    amount_ml: Optional[float] = None
    duration_minutes: Optional[float] = None
    interval_hours: Optional[float] = None


@dataclass(frozen=True, slots=True)
class CustomPreferences:
    """
    Custom preferences for a baby.

    ``preference_weight`` is the fraction in ``[0, 1]`` the custom values
    take in a blend; ``None`` means the per-kind default applies.
    """

    feeding: Optional[ActivityPreference] = None
    pumping: Optional[ActivityPreference] = None
    sleep: Optional[ActivityPreference] = None
    preference_weight: Optional[float] = None

    def for_activity(self, kind: PredictionKind) -> Optional[ActivityPreference]:
        if kind == PredictionKind.FEEDING:
            return self.feeding
        if kind == PredictionKind.PUMPING:
            return self.pumping
        if kind == PredictionKind.SLEEP:
            return self.sleep
        return None
