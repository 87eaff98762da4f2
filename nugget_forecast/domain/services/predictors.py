"""
Domain Service - Predictors

Next-event predictions for feeding, pumping, sleep and diaper changes.

Each predictor follows the same pipeline:

1. Keep the relevant activity types, dropping scheduled placeholders and
   skipped (dismissed) entries, newest first, capped at the policy's
   history limit.
2. Compute the baby's age in days (``None`` when no birth date is known).
3. Derive the age-based/recent/custom blend weights from the custom
   preference weight (or the policy default for the kind).
4. Blend the age-based interval with the recent gaps to get the interval,
   confidence tier and next event time.
5. Blend suggested volume and duration.
6. Assemble an immutable result.

The predictors are total: any typed input, including an empty history and an
unknown birth date, produces a fully populated result. ``now`` is always
passed in; nothing here reads the system clock.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from statistics import fmean
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
)

from nugget_forecast.domain.entities.activity import (
    DIAPER_TYPES,
    FEEDING_TYPES,
    ActivityRecord,
    ActivityType,
    DiaperDetails,
    DiaperKind,
    NursingDetails,
    PumpingDetails,
)
from nugget_forecast.domain.entities.policy import DEFAULT_POLICY, PredictionPolicy
from nugget_forecast.domain.entities.prediction import (
    BlendResult,
    CalculationDetails,
    DiaperPrediction,
    FeedingPrediction,
    PredictionKind,
    PredictionResult,
    PumpingPrediction,
    RecentPatternEntry,
)
from nugget_forecast.domain.entities.preferences import (
    ActivityPreference,
    CustomPreferences,
)

from .age import BirthDate, baby_age_days
from .age_tables import (
    feeding_amount_range,
    interval_hours_for,
    pumping_amount_range,
    typical_feeding_duration,
    typical_pumping_duration,
    typical_sleep_duration,
)
from .blending import blend, split_preference_weight
from .intervals import IntervalSummary, add_hours, summarize_intervals
from .nursing import estimate_nursing_volume, next_nursing_side, nursing_side_of
from .overdue import OverdueState, overdue_state
from .pumping_volume import is_colostrum_phase, pumped_amount_ml

NURSING_ESTIMATE_SOURCE = "age-and-duration estimate"

# Recorded sleeps at or above this length are treated as logging mistakes.
MAX_REALISTIC_SLEEP_MINUTES = 480.0

_PUMPING_TYPES = frozenset({ActivityType.PUMPING})
_SLEEP_TYPES = frozenset({ActivityType.SLEEP})


@dataclass(frozen=True, slots=True)
class _History:
    records: List[ActivityRecord]
    recent_skip_time: Optional[datetime]


@dataclass(frozen=True, slots=True)
class _Timing:
    age_days: Optional[int]
    age_based_interval: float
    summary: IntervalSummary
    next_event_time: datetime
    overdue: OverdueState


def _select_history(
    activities: Iterable[ActivityRecord],
    types: FrozenSet[ActivityType],
    limit: int,
) -> _History:
    relevant = [record for record in activities if record.type in types]
    relevant.sort(key=lambda record: record.start_time, reverse=True)

    skipped = [record for record in relevant if record.is_skipped]
    kept = [
        record
        for record in relevant
        if not record.is_scheduled and not record.is_skipped
    ]
    return _History(
        records=kept[: max(limit, 0)],
        recent_skip_time=skipped[0].start_time if skipped else None,
    )


def _positive_average(values: Iterable[Optional[float]]) -> Optional[float]:
    usable = [value for value in values if value is not None and value > 0]
    return fmean(usable) if usable else None


def _resolve_preference(
    kind: PredictionKind,
    custom_preferences: Optional[CustomPreferences],
    policy: PredictionPolicy,
) -> Tuple[ActivityPreference, Tuple[float, float, float]]:
    preference = None
    preference_weight = None
    if custom_preferences is not None:
        preference = custom_preferences.for_activity(kind)
        preference_weight = custom_preferences.preference_weight
    if preference_weight is None:
        preference_weight = policy.preference_weight_for(kind)
    return preference or ActivityPreference(), split_preference_weight(
        preference_weight
    )


def _blend_with(
    weights: Tuple[float, float, float],
    age_based_value: Optional[float],
    recent_value: Optional[float],
    custom_value: Optional[float],
) -> BlendResult:
    age_weight, recent_weight, custom_weight = weights
    return blend(
        age_based_value=age_based_value,
        age_based_weight=age_weight,
        recent_value=recent_value,
        recent_weight=recent_weight,
        custom_value=custom_value,
        custom_weight=custom_weight,
    )


def _rounded(result: Optional[BlendResult]) -> Optional[float]:
    if result is None or result.value is None:
        return None
    return float(round(result.value))


def _forecast_timing(
    kind: PredictionKind,
    records: Sequence[ActivityRecord],
    baby_birth_date: Optional[BirthDate],
    preference: ActivityPreference,
    now: datetime,
    policy: PredictionPolicy,
) -> _Timing:
    age_days = baby_age_days(baby_birth_date, now)
    if age_days is None and preference.interval_hours:
        age_based_interval = preference.interval_hours
    else:
        age_based_interval = interval_hours_for(kind, age_days)

    summary = summarize_intervals(
        [record.start_time for record in records],
        age_based_interval,
        policy.max_valid_gap_hours,
    )
    if records:
        next_event_time = add_hours(records[0].start_time, summary.predicted_interval)
    else:
        next_event_time = add_hours(now, age_based_interval)

    overdue = overdue_state(
        next_event_time,
        summary.predicted_interval,
        age_days,
        kind,
        now,
        policy.recovery_interval_factor,
    )
    return _Timing(
        age_days=age_days,
        age_based_interval=age_based_interval,
        summary=summary,
        next_event_time=next_event_time,
        overdue=overdue,
    )


def _recent_pattern(
    records: Sequence[ActivityRecord],
    intervals: Sequence[Optional[float]],
    limit: int,
    amount_of: Callable[[ActivityRecord], Optional[float]],
) -> Tuple[RecentPatternEntry, ...]:
    return tuple(
        RecentPatternEntry(
            time=record.start_time,
            interval_from_previous=intervals[index],
            amount_ml=amount_of(record),
            duration_minutes=record.duration_minutes,
            notes=record.notes,
            type=record.type.value,
        )
        for index, record in enumerate(records[: max(limit, 0)])
    )


def _recorded_amount(record: ActivityRecord) -> Optional[float]:
    return record.amount_ml


def _nursing_minutes(record: ActivityRecord) -> Optional[float]:
    """Session length, falling back to the per-side durations."""
    if record.duration_minutes:
        return record.duration_minutes
    details = record.details
    if isinstance(details, NursingDetails):
        total = (details.left_duration_minutes or 0) + (
            details.right_duration_minutes or 0
        )
        if total > 0:
            return total
    return None


def _diaper_kind(record: ActivityRecord) -> Optional[DiaperKind]:
    if isinstance(record.details, DiaperDetails):
        return record.details.kind
    if record.type in (ActivityType.WET, ActivityType.DIRTY, ActivityType.BOTH):
        return DiaperKind(record.type.value)
    return None


def _likely_diaper_kind(
    records: Sequence[ActivityRecord], limit: int
) -> Optional[DiaperKind]:
    """Most common wet/dirty/both kind among the latest changes."""
    kinds = [
        kind
        for kind in (_diaper_kind(record) for record in records[: max(limit, 0)])
        if kind is not None
    ]
    if not kinds:
        return None
    most_common, _ = Counter(kinds).most_common(1)[0]
    if most_common == DiaperKind.DIAPER:
        return None
    return most_common


def _common_fields(
    kind: PredictionKind,
    history: _History,
    timing: _Timing,
    policy: PredictionPolicy,
    amount_of: Callable[[ActivityRecord], Optional[float]],
    volume_blend: Optional[BlendResult],
    duration_blend: Optional[BlendResult],
) -> Dict[str, Any]:
    records = history.records
    summary = timing.summary
    last = records[0] if records else None
    return {
        "kind": kind,
        "next_event_time": timing.next_event_time,
        "confidence_level": summary.confidence,
        "interval_hours": summary.predicted_interval,
        "average_interval_hours": summary.average,
        "last_event_time": last.start_time if last else None,
        "last_event_amount": amount_of(last) if last else None,
        "last_event_duration": last.duration_minutes if last else None,
        "recent_pattern": _recent_pattern(
            records, summary.intervals, policy.recent_pattern_limit, amount_of
        ),
        "suggested_volume": _rounded(volume_blend),
        "suggested_volume_blend": volume_blend,
        "suggested_duration": _rounded(duration_blend),
        "suggested_duration_blend": duration_blend,
        "calculation_details": CalculationDetails(
            age_based_interval=timing.age_based_interval,
            recent_average_interval=summary.average,
            last_interval=summary.last,
            weights=summary.weights,
            data_points=len(records),
            valid_interval_count=len(summary.valid_intervals),
        ),
        "is_overdue": timing.overdue.is_overdue,
        "overdue_minutes": timing.overdue.overdue_minutes,
        "suggested_recovery_time": timing.overdue.suggested_recovery_time,
        "recent_skip_time": history.recent_skip_time,
    }


def predict_next_feeding(
    recent_activities: Iterable[ActivityRecord],
    baby_birth_date: Optional[BirthDate],
    custom_preferences: Optional[CustomPreferences] = None,
    *,
    now: datetime,
    policy: PredictionPolicy = DEFAULT_POLICY,
) -> FeedingPrediction:
    """
    Predict the next bottle or nursing feeding.

    The suggested volume normally blends the age-based medium amount, the
    recent bottle average and the custom amount. When the latest feeding was
    a nursing session the volume comes from the nursing estimator instead,
    since nursing intake is never measured.
    """
    kind = PredictionKind.FEEDING
    history = _select_history(recent_activities, FEEDING_TYPES, policy.history_limit)
    preference, weights = _resolve_preference(kind, custom_preferences, policy)
    timing = _forecast_timing(
        kind, history.records, baby_birth_date, preference, now, policy
    )
    records = history.records
    last = records[0] if records else None

    typical_duration = typical_feeding_duration(timing.age_days)
    duration_blend = _blend_with(
        weights,
        typical_duration,
        _positive_average(
            record.duration_minutes
            for record in records
            if record.type == ActivityType.NURSING
        ),
        preference.duration_minutes,
    )

    last_side = nursing_side_of(last) if last else None
    if last is not None and last.type == ActivityType.NURSING:
        estimate = estimate_nursing_volume(
            timing.age_days,
            _nursing_minutes(last) or typical_duration,
            last_side,
        )
        volume_blend = BlendResult(
            value=estimate.total_ml, source=NURSING_ESTIMATE_SOURCE
        )
    else:
        volume_blend = _blend_with(
            weights,
            feeding_amount_range(timing.age_days).medium,
            _positive_average(
                record.amount_ml
                for record in records
                if record.type == ActivityType.BOTTLE
            ),
            preference.amount_ml,
        )

    return FeedingPrediction(
        **_common_fields(
            kind,
            history,
            timing,
            policy,
            _recorded_amount,
            volume_blend,
            duration_blend,
        ),
        suggested_type=last.type.value if last else None,
        last_nursing_side=last_side,
        suggested_nursing_side=next_nursing_side(last_side) if last_side else None,
    )


def predict_next_pumping(
    recent_activities: Iterable[ActivityRecord],
    baby_birth_date: Optional[BirthDate],
    custom_preferences: Optional[CustomPreferences] = None,
    *,
    now: datetime,
    policy: PredictionPolicy = DEFAULT_POLICY,
) -> PumpingPrediction:
    """Predict the next pumping session and its expected output."""
    kind = PredictionKind.PUMPING
    history = _select_history(recent_activities, _PUMPING_TYPES, policy.history_limit)
    preference, weights = _resolve_preference(kind, custom_preferences, policy)
    timing = _forecast_timing(
        kind, history.records, baby_birth_date, preference, now, policy
    )
    records = history.records

    volume_blend = _blend_with(
        weights,
        pumping_amount_range(timing.age_days).medium,
        _positive_average(pumped_amount_ml(record) for record in records),
        preference.amount_ml,
    )
    duration_blend = _blend_with(
        weights,
        typical_pumping_duration(timing.age_days),
        _positive_average(record.duration_minutes for record in records),
        preference.duration_minutes,
    )

    is_colostrum = timing.age_days is not None and is_colostrum_phase(
        timing.age_days
    )
    if records and isinstance(records[0].details, PumpingDetails):
        is_colostrum = bool(records[0].details.is_colostrum) or is_colostrum

    return PumpingPrediction(
        **_common_fields(
            kind,
            history,
            timing,
            policy,
            pumped_amount_ml,
            volume_blend,
            duration_blend,
        ),
        is_colostrum=is_colostrum,
    )


def predict_next_sleep(
    recent_activities: Iterable[ActivityRecord],
    baby_birth_date: Optional[BirthDate],
    custom_preferences: Optional[CustomPreferences] = None,
    *,
    now: datetime,
    policy: PredictionPolicy = DEFAULT_POLICY,
) -> PredictionResult:
    """Predict the next sleep; there is no volume, only a suggested duration."""
    kind = PredictionKind.SLEEP
    history = _select_history(recent_activities, _SLEEP_TYPES, policy.history_limit)
    preference, weights = _resolve_preference(kind, custom_preferences, policy)
    timing = _forecast_timing(
        kind, history.records, baby_birth_date, preference, now, policy
    )

    duration_blend = _blend_with(
        weights,
        typical_sleep_duration(timing.age_days),
        _positive_average(
            record.duration_minutes
            for record in history.records
            if record.duration_minutes is not None
            and record.duration_minutes < MAX_REALISTIC_SLEEP_MINUTES
        ),
        preference.duration_minutes,
    )

    return PredictionResult(
        **_common_fields(
            kind,
            history,
            timing,
            policy,
            _recorded_amount,
            None,
            duration_blend,
        )
    )


def predict_next_diaper(
    recent_activities: Iterable[ActivityRecord],
    baby_birth_date: Optional[BirthDate],
    *,
    now: datetime,
    policy: PredictionPolicy = DEFAULT_POLICY,
) -> DiaperPrediction:
    """
    Predict the next diaper change.

    Timing follows the shared interval blend. There is no volume or duration
    to suggest; instead the most common wet/dirty/both kind among the recent
    changes is offered as the suggested type.
    """
    kind = PredictionKind.DIAPER
    history = _select_history(recent_activities, DIAPER_TYPES, policy.history_limit)
    timing = _forecast_timing(
        kind, history.records, baby_birth_date, ActivityPreference(), now, policy
    )
    records = history.records
    last_kind = _diaper_kind(records[0]) if records else None
    suggested = _likely_diaper_kind(records, policy.recent_pattern_limit)

    return DiaperPrediction(
        **_common_fields(
            kind,
            history,
            timing,
            policy,
            _recorded_amount,
            None,
            None,
        ),
        last_diaper_type=last_kind.value if last_kind else None,
        suggested_type=suggested.value if suggested else None,
    )
