"""Volume unit conversion and unit-specific display helpers."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

ML_PER_OZ = 29.5735


class VolumeUnit(str, Enum):
    ML = "ML"
    OZ = "OZ"


def ml_to_oz(ml: float) -> float:
    """Convert milliliters to ounces, rounded to the nearest 0.5 oz."""
    return round(ml / ML_PER_OZ * 2) / 2


def ml_to_oz_precise(ml: float) -> float:
    """
    Convert milliliters to ounces for small volumes.

    Below half an ounce the result keeps 0.1 oz precision and never drops to
    zero for a non-zero volume.
    """
    if ml == 0:
        return 0.0
    oz = ml / ML_PER_OZ
    if oz < 0.5:
        return max(0.1, round(oz * 10) / 10)
    return round(oz * 2) / 2


def oz_to_ml(oz: float) -> int:
    """Convert ounces to whole milliliters."""
    return round(oz * ML_PER_OZ)


def volume_unit_for(measurement_system: Optional[str]) -> VolumeUnit:
    return VolumeUnit.OZ if measurement_system == "imperial" else VolumeUnit.ML


def volume_step(unit: VolumeUnit) -> float:
    return 0.5 if unit == VolumeUnit.OZ else 30


def quick_select_volumes(unit: VolumeUnit) -> List[float]:
    if unit == VolumeUnit.OZ:
        return [2, 3, 4, 6]
    return [60, 90, 120, 180]


# (max age in days, ml options, oz options)
_QUICK_SELECT_BY_AGE = (
    (2, [30, 45, 60, 75], [1, 1.5, 2, 2.5]),
    (7, [30, 60, 75, 90], [1, 2, 2.5, 3]),
    (14, [60, 75, 90, 105], [2, 2.5, 3, 3.5]),
    (30, [75, 90, 120, 135], [2.5, 3, 4, 4.5]),
    (60, [90, 120, 150, 165], [3, 4, 5, 5.5]),
    (120, [120, 150, 180, 210], [4, 5, 6, 7]),
    (180, [150, 180, 210, 240], [5, 6, 7, 8]),
)
_QUICK_SELECT_OLDER = ([180, 210, 240, 270], [6, 7, 8, 9])


def quick_select_volumes_by_age(
    baby_age_days: Optional[int], unit: VolumeUnit
) -> List[float]:
    """Age-appropriate bottle quick-select options."""
    if baby_age_days is None:
        return quick_select_volumes(unit)

    ml_options, oz_options = _QUICK_SELECT_OLDER
    for max_age, ml_values, oz_values in _QUICK_SELECT_BY_AGE:
        if baby_age_days <= max_age:
            ml_options, oz_options = ml_values, oz_values
            break
    return list(oz_options if unit == VolumeUnit.OZ else ml_options)


def format_volume(amount_ml: float, unit: VolumeUnit, show_unit: bool = True) -> str:
    """Format a milliliter amount in the user's unit, e.g. ``"4oz"``."""
    value = ml_to_oz(amount_ml) if unit == VolumeUnit.OZ else round(amount_ml)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{unit.value.lower()}" if show_unit else str(value)
