"""
Activity DTOs - Application Layer

Boundary models for the activity history handed to the predictors. Raw
payloads from the activity-listing service are parsed here once; the domain
only ever sees typed ``ActivityRecord`` values.

Keys are accepted in either camelCase or snake_case. The ``details`` payload
is a union discriminated by its ``type`` key.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from nugget_forecast.domain.entities.activity import (
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
)


class CamelModel(BaseModel):
    """Base model accepting camelCase aliases alongside field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NursingDetailsDTO(CamelModel):
    type: Literal["nursing"] = "nursing"
    side: NursingSide = Field(default=NursingSide.BOTH, description="Breast used")
    left_duration_minutes: Optional[float] = Field(default=None, ge=0)
    right_duration_minutes: Optional[float] = Field(default=None, ge=0)
    skipped: bool = False
    skip_reason: Optional[str] = None

    def to_domain(self) -> NursingDetails:
        return NursingDetails(
            side=self.side,
            left_duration_minutes=self.left_duration_minutes,
            right_duration_minutes=self.right_duration_minutes,
            skipped=self.skipped,
            skip_reason=self.skip_reason,
        )


class BottleDetailsDTO(CamelModel):
    type: Literal["bottle"] = "bottle"
    skipped: bool = False
    skip_reason: Optional[str] = None

    def to_domain(self) -> BottleDetails:
        return BottleDetails(skipped=self.skipped, skip_reason=self.skip_reason)


class DiaperDetailsDTO(CamelModel):
    type: Literal["diaper", "wet", "dirty", "both"] = "diaper"
    color: Optional[str] = None
    consistency: Optional[str] = None
    size: Optional[Literal["little", "medium", "large"]] = None
    skipped: bool = False
    skip_reason: Optional[str] = None

    def to_domain(self) -> DiaperDetails:
        return DiaperDetails(
            kind=DiaperKind(self.type),
            color=self.color,
            consistency=self.consistency,
            size=self.size,
            skipped=self.skipped,
            skip_reason=self.skip_reason,
        )


class MedicineDetailsDTO(CamelModel):
    type: Literal["medicine"] = "medicine"
    name: str = Field(min_length=1)
    dosage: str

    def to_domain(self) -> MedicineDetails:
        return MedicineDetails(name=self.name, dosage=self.dosage)


class PumpingDetailsDTO(CamelModel):
    type: Literal["pumping"] = "pumping"
    left_breast_ml: Optional[float] = Field(default=None, ge=0)
    right_breast_ml: Optional[float] = Field(default=None, ge=0)
    is_colostrum: Optional[bool] = None
    skipped: bool = False
    skip_reason: Optional[str] = None

    def to_domain(self) -> PumpingDetails:
        return PumpingDetails(
            left_breast_ml=self.left_breast_ml,
            right_breast_ml=self.right_breast_ml,
            is_colostrum=self.is_colostrum,
            skipped=self.skipped,
            skip_reason=self.skip_reason,
        )


class SolidFoodItemDTO(CamelModel):
    food_name: str = Field(min_length=1)
    reaction: Literal[
        "none", "liked", "disliked", "allergic", "rash", "vomiting", "other"
    ] = "none"
    allergen_info: Optional[str] = None
    notes: Optional[str] = None
    portion: Optional[str] = None


class SolidsDetailsDTO(CamelModel):
    type: Literal["solids"] = "solids"
    items: List[SolidFoodItemDTO] = Field(default_factory=list)

    def to_domain(self) -> SolidsDetails:
        return SolidsDetails(
            items=tuple(
                SolidFoodItem(
                    food_name=item.food_name,
                    reaction=item.reaction,
                    allergen_info=item.allergen_info,
                    notes=item.notes,
                    portion=item.portion,
                )
                for item in self.items
            )
        )


class TemperatureDetailsDTO(CamelModel):
    type: Literal["temperature"] = "temperature"
    temperature_fahrenheit: float
    method: Optional[
        Literal["oral", "rectal", "axillary", "temporal", "tympanic"]
    ] = None

    def to_domain(self) -> TemperatureDetails:
        return TemperatureDetails(
            temperature_fahrenheit=self.temperature_fahrenheit, method=self.method
        )


class SleepDetailsDTO(CamelModel):
    type: Literal["sleep"] = "sleep"
    sleep_type: SleepType = SleepType.NAP
    location: Optional[str] = None
    quality: Optional[Literal["peaceful", "restless", "fussy", "crying"]] = None
    wake_reason: Optional[str] = None
    is_co_sleeping: Optional[bool] = None
    skipped: bool = False
    skip_reason: Optional[str] = None

    def to_domain(self) -> SleepDetails:
        return SleepDetails(
            sleep_type=self.sleep_type,
            location=self.location,
            quality=self.quality,
            wake_reason=self.wake_reason,
            is_co_sleeping=self.is_co_sleeping,
            skipped=self.skipped,
            skip_reason=self.skip_reason,
        )


ActivityDetailsDTO = Annotated[
    Union[
        NursingDetailsDTO,
        BottleDetailsDTO,
        DiaperDetailsDTO,
        MedicineDetailsDTO,
        PumpingDetailsDTO,
        SolidsDetailsDTO,
        TemperatureDetailsDTO,
        SleepDetailsDTO,
    ],
    Field(discriminator="type"),
]


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ActivityRecordDTO(CamelModel):
    """One logged activity as received from the activity-listing service."""

    id: str = Field(min_length=1, description="Activity identifier")
    start_time: datetime = Field(description="When the activity started")
    type: ActivityType = Field(description="Activity kind")
    amount_ml: Optional[float] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("amount_ml", "amountMl", "amount"),
        description="Recorded volume in milliliters",
    )
    duration_minutes: Optional[float] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices(
            "duration_minutes", "durationMinutes", "duration"
        ),
        description="Recorded duration in minutes",
    )
    details: Optional[ActivityDetailsDTO] = None
    is_scheduled: bool = False
    notes: Optional[str] = None
    feeding_source: Optional[FeedingSource] = None
    end_time: Optional[datetime] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "act_01",
                "startTime": "2025-03-01T09:30:00Z",
                "type": "bottle",
                "amountMl": 90,
                "feedingSource": "formula",
                "details": {"type": "bottle"},
            }
        }
    }

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc_when_naive(cls, v):
        """Timestamps without an offset are taken to be UTC."""
        return as_utc(v)

    def to_domain(self) -> ActivityRecord:
        return ActivityRecord(
            id=self.id,
            start_time=self.start_time,
            type=self.type,
            amount_ml=self.amount_ml,
            duration_minutes=self.duration_minutes,
            details=self.details.to_domain() if self.details else None,
            is_scheduled=self.is_scheduled,
            notes=self.notes,
            feeding_source=self.feeding_source,
            end_time=self.end_time,
        )
