from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Tuple, get_type_hints

import pytest

from nugget_forecast.application.dtos.activity_dto import ActivityRecordDTO
from nugget_forecast.application.dtos.preferences_dto import CustomPreferencesDTO
from nugget_forecast.application.use_cases import (
    PredictNextDiaperUseCase,
    PredictNextFeedingUseCase,
    PredictNextPumpingUseCase,
    PredictNextSleepUseCase,
)
from nugget_forecast.domain.entities.activity import ActivityRecord, ActivityType
from nugget_forecast.domain.entities.errors import ActivityValidationError
from nugget_forecast.domain.entities.policy import DEFAULT_POLICY, PredictionPolicy
from nugget_forecast.domain.entities.prediction import (
    ConfidenceLevel,
    DiaperPrediction,
    FeedingPrediction,
    PredictionKind,
    PredictionResult,
    PredictionStatus,
    PumpingPrediction,
)


class _RecordingLogger:
    def __init__(self) -> None:
        self.events: List[Tuple[str, str, Dict[str, Any]]] = []

    def info(self, event: str, **kwargs: Any) -> None:
        self.events.append(("info", event, kwargs))

    def warning(self, event: str, **kwargs: Any) -> None:
        self.events.append(("warning", event, kwargs))


@pytest.fixture()
def recording_logger(monkeypatch) -> _RecordingLogger:
    logger = _RecordingLogger()
    monkeypatch.setattr(
        "nugget_forecast.application.use_cases.prediction_use_cases.logger", logger
    )
    return logger


def _iso(moment) -> str:
    return moment.isoformat().replace("+00:00", "Z")


def test_feeding_use_case_parses_raw_payloads(now, recording_logger) -> None:
    use_case = PredictNextFeedingUseCase(DEFAULT_POLICY, clock=lambda: now)
    activities = [
        {
            "id": "act_1",
            "startTime": _iso(now - timedelta(hours=3)),
            "type": "bottle",
            "amountMl": 90,
            "details": {"type": "bottle"},
        },
        {
            "id": "act_2",
            "startTime": _iso(now - timedelta(minutes=30)),
            "type": "wet",
        },
    ]

    response = use_case.execute(activities, _iso(now - timedelta(days=10)))

    assert response.kind == PredictionKind.FEEDING
    assert response.confidence_level == ConfidenceLevel.LOW
    assert response.next_event_time == now - timedelta(minutes=30)
    assert response.suggested_volume == 90
    assert response.status == PredictionStatus.OVERDUE
    assert response.is_overdue is True

    events = [event for _, event, _ in recording_logger.events]
    assert events == ["prediction.feeding.start", "prediction.feeding.completed"]
    completed = recording_logger.events[-1][2]
    assert completed["confidence"] == "low"
    assert completed["status"] == "overdue"


def test_use_case_accepts_domain_records_and_dtos(
    now, make_activity, recording_logger
) -> None:
    use_case = PredictNextSleepUseCase(DEFAULT_POLICY, clock=lambda: now)
    record = make_activity(ActivityType.SLEEP, 3, duration_minutes=60)
    dto = ActivityRecordDTO(
        id="act_dto",
        start_time=now - timedelta(hours=1),
        type=ActivityType.SLEEP,
        duration_minutes=45,
    )

    response = use_case.execute([record, dto], date(2025, 2, 1))

    assert response.kind == PredictionKind.SLEEP
    assert response.calculation_details.data_points == 2
    assert response.confidence_level == ConfidenceLevel.MEDIUM
    assert response.last_event_time == dto.start_time


def test_use_case_uses_injected_policy(now, make_activity, recording_logger) -> None:
    policy = PredictionPolicy(history_limit=2)
    use_case = PredictNextPumpingUseCase(policy, clock=lambda: now)
    activities = [
        make_activity(ActivityType.PUMPING, hours, amount_ml=100)
        for hours in (1, 4, 7, 10)
    ]

    response = use_case.execute(activities, None)

    assert response.calculation_details.data_points == 2


def test_use_case_parses_custom_preferences(now, recording_logger) -> None:
    use_case = PredictNextFeedingUseCase(DEFAULT_POLICY, clock=lambda: now)

    from_mapping = use_case.execute(
        [], None, {"feeding": {"intervalHours": 2}, "preferenceWeight": 1.0}
    )
    from_dto = use_case.execute(
        [], None, CustomPreferencesDTO(feeding={"interval_hours": 2})
    )

    assert from_mapping.next_event_time == now + timedelta(hours=2)
    assert from_dto.next_event_time == now + timedelta(hours=2)


def test_use_case_collects_validation_errors(now, recording_logger) -> None:
    use_case = PredictNextFeedingUseCase(DEFAULT_POLICY, clock=lambda: now)
    activities = [
        {"id": "ok", "startTime": _iso(now), "type": "bottle"},
        {"id": "bad", "startTime": "yesterday", "type": "bottle"},
        42,
    ]

    with pytest.raises(ActivityValidationError) as exc:
        use_case.execute(activities, "not-a-date", {"preferenceWeight": 2})

    errors = exc.value.details["errors"]
    assert any(error.startswith("activities[1].startTime") for error in errors)
    assert any(error.startswith("activities[2]: unsupported") for error in errors)
    assert any(error.startswith("babyBirthDate") for error in errors)
    assert any(error.startswith("customPreferences.preferenceWeight") for error in errors)
    assert recording_logger.events[0][:2] == (
        "warning",
        "prediction.feeding.invalid_input",
    )


def test_clock_is_read_once_per_call(now, recording_logger) -> None:
    calls = []

    def clock():
        calls.append(now)
        return now

    PredictNextSleepUseCase(DEFAULT_POLICY, clock=clock).execute([], None)

    assert len(calls) == 1


def test_naive_domain_records_are_taken_as_utc(now, recording_logger) -> None:
    use_case = PredictNextFeedingUseCase(DEFAULT_POLICY, clock=lambda: now)
    record = ActivityRecord(
        id="naive",
        start_time=datetime(2025, 3, 10, 9, 0),
        type=ActivityType.BOTTLE,
        amount_ml=90,
        end_time=datetime(2025, 3, 10, 9, 20),
    )

    response = use_case.execute([record], "2025-03-01")

    assert response.last_event_time == datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
    assert response.calculation_details.data_points == 1


def test_naive_domain_records_mix_with_offset_mappings(now, recording_logger) -> None:
    use_case = PredictNextFeedingUseCase(DEFAULT_POLICY, clock=lambda: now)
    record = ActivityRecord(
        id="naive",
        start_time=datetime(2025, 3, 10, 9, 0),
        type=ActivityType.BOTTLE,
        amount_ml=90,
    )
    mapping = {
        "id": "aware",
        "startTime": "2025-03-10T06:00:00Z",
        "type": "bottle",
        "amountMl": 80,
    }

    response = use_case.execute([mapping, record], "2025-03-01")

    assert response.calculation_details.data_points == 2
    assert response.last_event_time == datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
    assert response.recent_pattern[1].interval_from_previous == 3.0


def test_diaper_use_case(now, recording_logger) -> None:
    use_case = PredictNextDiaperUseCase(DEFAULT_POLICY, clock=lambda: now)
    activities = [
        {"id": "d1", "startTime": _iso(now - timedelta(hours=1)), "type": "wet"},
        {
            "id": "d2",
            "startTime": _iso(now - timedelta(hours=3)),
            "type": "diaper",
            "details": {"type": "dirty"},
        },
        {"id": "d3", "startTime": _iso(now - timedelta(hours=5)), "type": "wet"},
    ]

    response = use_case.execute(
        activities, _iso(now - timedelta(days=20)), {"preferenceWeight": 1.0}
    )

    assert response.kind == PredictionKind.DIAPER
    assert response.last_diaper_type == "wet"
    assert response.suggested_type == "wet"
    assert response.suggested_volume is None
    assert response.status == PredictionStatus.UPCOMING
    events = [event for _, event, _ in recording_logger.events]
    assert events == ["prediction.diaper.start", "prediction.diaper.completed"]


@pytest.mark.parametrize(
    ("use_case_cls", "result_type"),
    [
        (PredictNextFeedingUseCase, FeedingPrediction),
        (PredictNextPumpingUseCase, PumpingPrediction),
        (PredictNextSleepUseCase, PredictionResult),
        (PredictNextDiaperUseCase, DiaperPrediction),
    ],
)
def test_predict_overrides_declare_their_result_type(use_case_cls, result_type) -> None:
    hints = get_type_hints(use_case_cls._predict)

    assert hints["return"] is result_type
    assert set(hints) == {"records", "birth_date", "preferences", "now", "return"}
