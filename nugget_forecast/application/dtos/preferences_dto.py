"""DTOs for per-baby custom prediction preferences."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from nugget_forecast.domain.entities.preferences import (
    ActivityPreference,
    CustomPreferences,
)

from .activity_dto import CamelModel


class ActivityPreferenceDTO(CamelModel):
    amount_ml: Optional[float] = Field(
        default=None, ge=0, description="Preferred volume in milliliters"
    )
    duration_minutes: Optional[float] = Field(
        default=None, ge=0, description="Preferred duration in minutes"
    )
    interval_hours: Optional[float] = Field(
        default=None, gt=0, description="Preferred hours between events"
    )

    def to_domain(self) -> ActivityPreference:
        return ActivityPreference(
            amount_ml=self.amount_ml,
            duration_minutes=self.duration_minutes,
            interval_hours=self.interval_hours,
        )


class CustomPreferencesDTO(CamelModel):
    """Custom preferences; every field is optional."""

    feeding: Optional[ActivityPreferenceDTO] = None
    pumping: Optional[ActivityPreferenceDTO] = None
    sleep: Optional[ActivityPreferenceDTO] = None
    preference_weight: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Share of the blend given to the custom values",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "feeding": {"amountMl": 120, "durationMinutes": 20},
                "preferenceWeight": 0.5,
            }
        }
    }

    def to_domain(self) -> CustomPreferences:
        return CustomPreferences(
            feeding=self.feeding.to_domain() if self.feeding else None,
            pumping=self.pumping.to_domain() if self.pumping else None,
            sleep=self.sleep.to_domain() if self.sleep else None,
            preference_weight=self.preference_weight,
        )
