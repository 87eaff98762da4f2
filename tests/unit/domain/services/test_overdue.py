from __future__ import annotations

from datetime import timedelta

import pytest

from nugget_forecast.domain.entities.prediction import PredictionKind, PredictionStatus
from nugget_forecast.domain.services.overdue import (
    is_overdue,
    overdue_state,
    overdue_threshold,
    prediction_status,
    threshold_description,
)


@pytest.mark.parametrize(
    "kind, age, expected",
    [
        (PredictionKind.FEEDING, None, 15),
        (PredictionKind.FEEDING, 10, 20),
        (PredictionKind.FEEDING, 200, 45),
        (PredictionKind.SLEEP, 45, 40),
        (PredictionKind.DIAPER, 90, 75),
        (PredictionKind.PUMPING, 3, 20),
    ],
)
def test_overdue_threshold(kind, age, expected) -> None:
    assert overdue_threshold(kind, age) == expected


def test_prediction_status(now) -> None:
    kind = PredictionKind.FEEDING

    assert (
        prediction_status(now - timedelta(minutes=25), 10, kind, now)
        == PredictionStatus.OVERDUE
    )
    assert (
        prediction_status(now - timedelta(minutes=5), 10, kind, now)
        == PredictionStatus.SOON
    )
    assert (
        prediction_status(now + timedelta(minutes=10), 10, kind, now)
        == PredictionStatus.SOON
    )
    assert (
        prediction_status(now + timedelta(minutes=11), 10, kind, now)
        == PredictionStatus.UPCOMING
    )


def test_is_overdue_uses_threshold(now) -> None:
    kind = PredictionKind.FEEDING
    assert is_overdue(now - timedelta(minutes=21), 10, kind, now) is True
    assert is_overdue(now - timedelta(minutes=20), 10, kind, now) is False


def test_overdue_state_suggests_recovery_time(now) -> None:
    state = overdue_state(
        now - timedelta(minutes=60), 2.5, 10, PredictionKind.FEEDING, now, 0.6
    )

    assert state.is_overdue is True
    assert state.overdue_minutes == 60
    assert state.suggested_recovery_time == now + timedelta(minutes=90)


def test_overdue_state_within_threshold(now) -> None:
    state = overdue_state(
        now - timedelta(minutes=10), 2.5, 10, PredictionKind.FEEDING, now, 0.6
    )
    assert state.is_overdue is False
    assert state.overdue_minutes is None
    assert state.suggested_recovery_time is None


def test_threshold_description() -> None:
    assert threshold_description(PredictionKind.FEEDING, 3) == (
        "Marked overdue after 15 minutes because newborns need frequent care"
    )
    assert "flexible" in threshold_description(PredictionKind.SLEEP, 120)
