"""
Domain Entities - Activity

Logged caregiving events as read from the activity-listing service. Records
are immutable; the prediction engine only ever reads a recent window of them.

Activity details are a tagged union: each variant is its own dataclass and
consumers match on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union


class ActivityType(str, Enum):
    """Kind of logged activity."""

    SLEEP = "sleep"
    FEEDING = "feeding"
    BOTTLE = "bottle"
    NURSING = "nursing"
    PUMPING = "pumping"
    DIAPER = "diaper"
    WET = "wet"
    DIRTY = "dirty"
    BOTH = "both"
    SOLIDS = "solids"
    BATH = "bath"
    MEDICINE = "medicine"
    TEMPERATURE = "temperature"
    TUMMY_TIME = "tummy_time"
    GROWTH = "growth"
    POTTY = "potty"


FEEDING_TYPES = frozenset({ActivityType.BOTTLE, ActivityType.NURSING})
DIAPER_TYPES = frozenset(
    {ActivityType.DIAPER, ActivityType.WET, ActivityType.DIRTY, ActivityType.BOTH}
)


class FeedingSource(str, Enum):
    """Where the milk or formula for a feeding came from."""

    PUMPED = "pumped"
    DONOR = "donor"
    DIRECT = "direct"
    FORMULA = "formula"


class NursingSide(str, Enum):
    """Breast used during a nursing session."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class DiaperKind(str, Enum):
    DIAPER = "diaper"
    WET = "wet"
    DIRTY = "dirty"
    BOTH = "both"


class SleepType(str, Enum):
    NAP = "nap"
    NIGHT = "night"


@dataclass(frozen=True, slots=True)
class NursingDetails:
    side: NursingSide = NursingSide.BOTH
    left_duration_minutes: Optional[float] = None
    right_duration_minutes: Optional[float] = None
    skipped: bool = False
    skip_reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BottleDetails:
    skipped: bool = False
    skip_reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DiaperDetails:
    kind: DiaperKind = DiaperKind.DIAPER
    color: Optional[str] = None
    consistency: Optional[str] = None
    size: Optional[str] = None
    skipped: bool = False
    skip_reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class MedicineDetails:
    name: str
    dosage: str


@dataclass(frozen=True, slots=True)
class PumpingDetails:
    left_breast_ml: Optional[float] = None
    right_breast_ml: Optional[float] = None
    is_colostrum: Optional[bool] = None
    skipped: bool = False
    skip_reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SolidFoodItem:
    food_name: str
    reaction: str = "none"
    allergen_info: Optional[str] = None
    notes: Optional[str] = None
    portion: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SolidsDetails:
    items: Tuple[SolidFoodItem, ...] = ()


@dataclass(frozen=True, slots=True)
class TemperatureDetails:
    temperature_fahrenheit: float
    method: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SleepDetails:
    sleep_type: SleepType = SleepType.NAP
    location: Optional[str] = None
    quality: Optional[str] = None
    wake_reason: Optional[str] = None
    is_co_sleeping: Optional[bool] = None
    skipped: bool = False
    skip_reason: Optional[str] = None


ActivityDetails = Union[
    NursingDetails,
    BottleDetails,
    DiaperDetails,
    MedicineDetails,
    PumpingDetails,
    SolidsDetails,
    TemperatureDetails,
    SleepDetails,
]


def is_skipped(details: Optional[ActivityDetails]) -> bool:
    """Return True when the details mark a dismissed (skipped) prediction."""
    if details is None:
        return False
    if isinstance(
        details,
        (NursingDetails, BottleDetails, DiaperDetails, PumpingDetails, SleepDetails),
    ):
        return details.skipped
    if isinstance(details, (MedicineDetails, SolidsDetails, TemperatureDetails)):
        return False
    raise TypeError(f"Unsupported activity details: {type(details).__name__}")


@dataclass(frozen=True, slots=True)
class ActivityRecord:
    """One logged caregiving event."""

    id: str
    start_time: datetime
    type: ActivityType
    amount_ml: Optional[float] = None
    duration_minutes: Optional[float] = None
    details: Optional[ActivityDetails] = None
    is_scheduled: bool = False
    notes: Optional[str] = None
    feeding_source: Optional[FeedingSource] = None
    end_time: Optional[datetime] = None

    @property
    def is_skipped(self) -> bool:
        return is_skipped(self.details)
