"""
Domain Services Package

Pure functions behind the prediction engine: unit conversion, age tables,
blending, interval statistics, overdue checks, volume estimators and the
per-activity predictors.
"""

from .age import baby_age_days
from .age_tables import (
    AmountRange,
    diaper_interval_hours,
    feeding_amount_range,
    feeding_interval_hours,
    interval_hours_for,
    pumping_amount_range,
    pumping_interval_hours,
    sleep_interval_hours,
    typical_feeding_duration,
    typical_pumping_duration,
    typical_sleep_duration,
)
from .blending import blend, describe_blend, split_preference_weight
from .intervals import (
    IntervalSummary,
    add_hours,
    calculate_intervals,
    confidence_for,
    is_valid_interval,
    summarize_intervals,
    weights_for,
)
from .nursing import (
    NursingVolume,
    estimate_nursing_volume,
    infer_nursing_side,
    next_nursing_side,
    nursing_side_of,
)
from .overdue import (
    OverdueState,
    is_overdue,
    overdue_state,
    overdue_threshold,
    prediction_status,
    threshold_description,
)
from .predictors import (
    predict_next_diaper,
    predict_next_feeding,
    predict_next_pumping,
    predict_next_sleep,
)
from .pumping_volume import (
    PumpingVolume,
    calculate_pumping_volumes,
    is_colostrum_phase,
    pumped_amount_ml,
)
from .units import (
    ML_PER_OZ,
    VolumeUnit,
    format_volume,
    ml_to_oz,
    ml_to_oz_precise,
    oz_to_ml,
    quick_select_volumes,
    quick_select_volumes_by_age,
    volume_step,
    volume_unit_for,
)

__all__ = [
    "baby_age_days",
    "AmountRange",
    "diaper_interval_hours",
    "feeding_amount_range",
    "feeding_interval_hours",
    "interval_hours_for",
    "pumping_amount_range",
    "pumping_interval_hours",
    "sleep_interval_hours",
    "typical_feeding_duration",
    "typical_pumping_duration",
    "typical_sleep_duration",
    "blend",
    "describe_blend",
    "split_preference_weight",
    "IntervalSummary",
    "add_hours",
    "calculate_intervals",
    "confidence_for",
    "is_valid_interval",
    "summarize_intervals",
    "weights_for",
    "NursingVolume",
    "estimate_nursing_volume",
    "infer_nursing_side",
    "next_nursing_side",
    "nursing_side_of",
    "OverdueState",
    "is_overdue",
    "overdue_state",
    "overdue_threshold",
    "prediction_status",
    "threshold_description",
    "predict_next_diaper",
    "predict_next_feeding",
    "predict_next_pumping",
    "predict_next_sleep",
    "PumpingVolume",
    "calculate_pumping_volumes",
    "is_colostrum_phase",
    "pumped_amount_ml",
    "ML_PER_OZ",
    "VolumeUnit",
    "format_volume",
    "ml_to_oz",
    "ml_to_oz_precise",
    "oz_to_ml",
    "quick_select_volumes",
    "quick_select_volumes_by_age",
    "volume_step",
    "volume_unit_for",
]
